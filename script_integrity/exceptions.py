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
Exceptions raised by the script integrity helpers.
"""


class ScriptIntegrityError(Exception):
    """Base exception for script integrity errors."""
    pass


class PlaceholderCollisionError(ScriptIntegrityError):
    """An attribute of a proxied script contains the reserved self-reference marker."""

    def __init__(self, attribute, placeholder):
        self.attribute = attribute
        self.placeholder = placeholder
        super().__init__(
            f"Attribute '{attribute}' contains the reserved marker '{placeholder}'"
        )
