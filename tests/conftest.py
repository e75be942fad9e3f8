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
Shared test fixtures for the script integrity project.
"""

import os
import pytest
from django.test import RequestFactory

# Configure Django settings for pytest-django
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "project.settings.test")


@pytest.fixture
def rf_request():
    """A plain GET request for the home page."""
    return RequestFactory().get("/")

