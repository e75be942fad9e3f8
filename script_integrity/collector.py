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
Per-request record of the script hashes rendered into a page.

Template tags register every integrity value they emit; the CSP middleware
reads them back when it builds the script-src directive.
"""

REQUEST_ATTRIBUTE = "csp_script_hashes"


def register_script_hash(request, integrity):
    """Remember ``integrity`` for the response to ``request``. Duplicates are ignored."""
    if request is None or not integrity:
        return
    hashes = getattr(request, REQUEST_ATTRIBUTE, None)
    if hashes is None:
        hashes = []
        setattr(request, REQUEST_ATTRIBUTE, hashes)
    if integrity not in hashes:
        hashes.append(integrity)


def get_script_hashes(request):
    """Hashes registered for ``request``, in registration order."""
    return list(getattr(request, REQUEST_ATTRIBUTE, None) or [])
