"""
Performance testing package (Locust-based).

Contains Locust user classes, helper utilities, and a CI threshold
checker that together provide load and stress testing for the load
demo endpoint (``GET /api/hello``) and the User API (``/users``).

Key Concepts Demonstrated:
- Steady "load" profile vs. ramping "stress" profile
- Tagged scenarios so CI can run subsets via ``--tags``
- A custom ``LoadTestShape`` for staged user ramps
- CSV-based threshold gates for automated pass/fail decisions
"""
