#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""

import os
import sys
from dotenv import load_dotenv


def main():
    """Run administrative tasks."""
    dotenv_path = os.path.join(os.path.dirname(__file__), ".env")
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path)

    # Determine the settings module based on ENVIRONMENT in .env
    settings_module = os.environ.get("DJANGO_SETTINGS_MODULE")
    environment = os.environ.get("ENVIRONMENT", "").strip().lower()
    if not settings_module:
        if environment == "production":
            settings_module = "project.settings.production"
        elif environment == "test":
            settings_module = "project.settings.test"
        else:
            settings_module = "project.settings.development"
            if environment not in ("", "development", "dev"):
                print(
                    f"Warning: Unrecognized ENVIRONMENT '{environment}', defaulting to development settings.",
                    file=sys.stderr,
                )
        os.environ["DJANGO_SETTINGS_MODULE"] = settings_module

    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
