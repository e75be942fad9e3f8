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
Shared security utilities for the script integrity project.

This module provides the security logging helpers used by the CSP middleware
and the script integrity services so that security events are reported in
one consistent, sanitised format.
"""

import re
import logging
from typing import Dict, Optional

logger = logging.getLogger('project.security')


class SecurityValidator:
    """
    Helpers for checking values before they are embedded or logged.
    """

    @staticmethod
    def contains_marker(value, marker: str) -> bool:
        """
        Check whether a value contains a reserved marker string.

        Args:
            value: Value to check, non-strings never match
            marker: The reserved marker

        Returns:
            True if the marker occurs in the value, False otherwise
        """
        if not isinstance(value, str):
            return False
        return marker in value

    @staticmethod
    def sanitize_log_value(value: str, max_length: int = 100) -> str:
        """
        Sanitize a value for safe logging by truncating and removing sensitive patterns.

        Args:
            value: String value to sanitize
            max_length: Maximum length of the returned string

        Returns:
            Sanitized string safe for logging
        """
        if not isinstance(value, str):
            return str(value)[:max_length]

        # Remove potential credentials or sensitive data
        sanitized = re.sub(r'(password|token|key|secret|nonce)=[^&\s]*', r'\1=***', value, flags=re.IGNORECASE)

        # Remove line breaks so one event stays on one log line
        sanitized = re.sub(r'[\r\n]+', ' ', sanitized)

        # Truncate if too long
        if len(sanitized) > max_length:
            sanitized = sanitized[:max_length] + '...'

        return sanitized


class SecurityLogger:
    """
    Centralized security logging utilities.
    """

    @staticmethod
    def log_security_event(event_type: str,
                          details: str,
                          context: Optional[Dict] = None,
                          severity: str = 'WARNING') -> None:
        """
        Log a security event with standardized format.

        Args:
            event_type: Type of security event (e.g., 'PLACEHOLDER_COLLISION')
            details: Detailed description of the event
            context: Optional extra information (attribute, path, etc.)
            severity: Log severity level
        """
        log_message = f"SECURITY_EVENT: {event_type} - {details}"

        if context:
            sanitized_info = {}
            for key, value in context.items():
                if isinstance(value, str):
                    sanitized_info[key] = SecurityValidator.sanitize_log_value(value)
                else:
                    sanitized_info[key] = str(value)

            log_message += f" - Context: {sanitized_info}"

        log_level = getattr(logging, severity.upper(), logging.WARNING)
        logger.log(log_level, log_message)

    @staticmethod
    def log_rejected_script(reason: str,
                            attribute: str,
                            value,
                            request_path: Optional[str] = None) -> None:
        """
        Log a script that was refused by the integrity services.

        Args:
            reason: Short reason code, e.g. 'placeholder_collision'
            attribute: Name of the offending attribute
            value: The offending value
            request_path: Optional request path the script was rendered for
        """
        context = {
            'attribute': attribute,
            'value': value,
        }

        if request_path:
            context['path'] = request_path

        SecurityLogger.log_security_event(
            event_type=f"{reason.upper()}_REJECTED",
            details=f"Rejected script: {reason.replace('_', ' ')}",
            context=context,
            severity='WARNING'
        )
