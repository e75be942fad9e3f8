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

import secrets
import logging
from django.conf import settings
from django.utils.deprecation import MiddlewareMixin
from django.utils.encoding import force_str

from script_integrity.collector import get_script_hashes
from script_integrity.hashing import csp_hash_source

logger = logging.getLogger("project.security")

# CSP directive value constants (avoids string duplication - SonarQube S1192)
CSP_SELF = "'self'"
CSP_NONE = "'none'"
CSP_DATA = "data:"
CSP_STRICT_DYNAMIC = "'strict-dynamic'"


class CSPMiddleware(MiddlewareMixin):
    """
    Middleware to set a Content Security Policy (CSP) header with a per-request nonce.
    The nonce is made available as 'csp_nonce' in the request and template context.
    Script hashes registered while rendering the page are added to script-src.
    """

    def _make_nonce(self):
        # 16 bytes = 128 bits of entropy, url-safe
        return secrets.token_urlsafe(16)

    def process_request(self, request):
        request.csp_nonce = self._make_nonce()

    def process_template_response(self, request, response):
        # Ensure csp_nonce is present on the request
        if not hasattr(request, "csp_nonce"):
            request.csp_nonce = self._make_nonce()
        # Add csp_nonce to the template context if possible
        if hasattr(response, "context_data") and response.context_data is not None:
            response.context_data["csp_nonce"] = request.csp_nonce
        return response

    def build_script_sources(self, request, nonce):
        """Sources for script-src: self, the nonce, strict-dynamic and rendered hashes."""
        sources = [CSP_SELF, f"'nonce-{nonce}'"]

        if getattr(settings, "CSP_STRICT_DYNAMIC", True):
            sources.append(CSP_STRICT_DYNAMIC)

        if getattr(settings, "CSP_SCRIPT_HASHES", True):
            hashes = get_script_hashes(request)
            sources.extend(csp_hash_source(integrity) for integrity in hashes)
            if hashes:
                logger.debug(
                    f"CSP: Added {len(hashes)} script hash(es) for {request.path}"
                )

        return sources

    def process_response(self, request, response):
        # Set the CSP header with the nonce
        nonce = getattr(request, "csp_nonce", None)
        if nonce:
            nonce = force_str(nonce)

            # Base CSP directives
            csp_directives = {
                "default-src": [CSP_SELF],
                "script-src": self.build_script_sources(request, nonce),
                "style-src": [CSP_SELF, f"'nonce-{nonce}'"],
                "img-src": [CSP_SELF, CSP_DATA],
                "font-src": [CSP_SELF, CSP_DATA],
                "connect-src": [CSP_SELF],
                "object-src": [CSP_NONE],
                "base-uri": [CSP_SELF],
                "form-action": [CSP_SELF],
                "frame-ancestors": [CSP_NONE],
                "worker-src": [CSP_NONE],
                "media-src": [CSP_SELF],
            }

            # Build the CSP header string
            csp_parts = []
            for directive, sources in csp_directives.items():
                csp_parts.append(f"{directive} {' '.join(sources)}")

            # Add upgrade-insecure-requests as a standalone directive
            csp_parts.append("upgrade-insecure-requests")

            # Join all directives with semicolons
            csp = "; ".join(csp_parts)

            # Set the CSP header
            response["Content-Security-Policy"] = csp

            # Add X-Content-Type-Options header to prevent MIME sniffing
            response["X-Content-Type-Options"] = "nosniff"

        return response
