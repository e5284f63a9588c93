"""
Routes package for the User API.

This package contains the route blueprint:
- api: JSON endpoints for listing and creating users
"""
