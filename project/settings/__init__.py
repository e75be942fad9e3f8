"""
Settings package initialization.
By default, this will import the development settings.
To use a different settings file, set the DJANGO_SETTINGS_MODULE environment variable
(project.settings.development, project.settings.test or project.settings.production).
"""

import os

DEV_SETTINGS_MODULE = "project.settings.development"

settings_module = os.environ.get("DJANGO_SETTINGS_MODULE", DEV_SETTINGS_MODULE)

if settings_module == "project.settings":
    # The bare package name means development settings
    os.environ["DJANGO_SETTINGS_MODULE"] = DEV_SETTINGS_MODULE
    settings_module = DEV_SETTINGS_MODULE

if settings_module == "project.settings.test":
    from .test import *
elif settings_module == "project.settings.production":
    from .production import *
else:
    # Development settings for anything else, including unknown modules
    from .development import *
