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

import base64
import hashlib

INTEGRITY_PREFIX = "sha256-"


def _to_utf8(code: str) -> bytes:
    # Surrogate pairs are joined, unpaired halves become U+FFFD
    utf16 = code.encode("utf-16-le", "surrogatepass")
    return utf16.decode("utf-16-le", "replace").encode("utf-8")


def integrity_sha256(code: str) -> str:
    """
    Return the CSP/SRI integrity value of a piece of script source.

    Lone surrogates are hashed as U+FFFD, the way browsers encode them.

    Example: integrity_sha256("") -> "sha256-47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="
    """
    digest = hashlib.sha256(_to_utf8(code)).digest()
    return INTEGRITY_PREFIX + base64.b64encode(digest).decode("ascii")


def csp_hash_source(integrity: str) -> str:
    """Wrap an integrity value as a script-src source expression."""
    return f"'{integrity}'"
