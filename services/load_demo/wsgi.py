"""WSGI entry point for the load demo service."""

import os

from services.load_demo.load_demo_app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))


if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"])
