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
Django production settings for the script integrity project.
"""

import os

from . import base as _base_settings

globals().update(
    {k: v for k, v in vars(_base_settings).items() if not k.startswith("_")}
)

# Get secret key from environment variable - no fallback to ensure proper configuration
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY")

DEBUG = False

DOMAIN = os.environ.get("DOMAIN", "localhost")

ALLOWED_HOSTS = [DOMAIN, "localhost"]

CSRF_TRUSTED_ORIGINS = [f"https://{DOMAIN}"]

# Security Settings

# HSTS settings
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

# Cookie security
SESSION_COOKIE_HTTPONLY = True
CSRF_COOKIE_HTTPONLY = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
CSRF_COOKIE_SAMESITE = "Strict"
