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
Version information for the script integrity project.
"""

# Version format: MAJOR.MINOR
# - MAJOR: Changes to generated loader code or hash format that affect deployed policies
# - MINOR: Incremented for each release with minor changes or bug fixes

VERSION = "1.04"

# Change log entries should be in the format:
# (version, date, description)
CHANGE_LOG = [
    (
        "1.04",
        "2026-10-19",
        "Hash lone surrogates as U+FFFD; load a single script given to trusted_script_loader",
    ),
    (
        "1.03",
        "2026-10-19",
        "Escape quotes, backslashes and line terminators in generated loader string literals",
    ),
    (
        "1.02",
        "2026-10-12",
        "Reject proxied scripts whose attributes contain the self-reference marker",
    ),
    ("1.01", "2026-10-05", "Added script_hash management command"),
    ("1.00", "2026-09-28", "Initial Release"),
]


def get_version():
    """Return the current version number."""
    return VERSION


def get_latest_changes(count=5):
    """Return the most recent changes from the change log."""
    if count is None:
        return CHANGE_LOG  # Return all changes
    return CHANGE_LOG[:count]
