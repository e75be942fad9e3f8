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

from project.version import get_version, get_latest_changes


def script_integrity(request):
    """
    Add version information and the request's CSP nonce to the template context.
    """
    return {
        'version': get_version(),
        'change_log': get_latest_changes(None),
        'csp_nonce': getattr(request, 'csp_nonce', ''),
    }
