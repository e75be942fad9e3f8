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
Tests for the shared security utilities.
"""

import logging
from unittest.mock import patch

from django.test import SimpleTestCase

from project.security.utils import SecurityLogger, SecurityValidator


class TestSecurityValidator(SimpleTestCase):
    """Test validation helpers."""

    def test_contains_marker(self):
        assert SecurityValidator.contains_marker("a-self-reference-proxy-b", "self-reference-proxy") is True
        assert SecurityValidator.contains_marker("a.js", "self-reference-proxy") is False

    def test_contains_marker_ignores_non_strings(self):
        assert SecurityValidator.contains_marker(True, "True") is False
        assert SecurityValidator.contains_marker(None, "x") is False

    def test_sanitize_log_value_masks_secrets(self):
        sanitized = SecurityValidator.sanitize_log_value("a.js?token=abc&nonce=xyz")
        assert "abc" not in sanitized
        assert "xyz" not in sanitized
        assert "token=***" in sanitized

    def test_sanitize_log_value_removes_line_breaks(self):
        assert SecurityValidator.sanitize_log_value("a\nb\r\nc") == "a b c"

    def test_sanitize_log_value_truncates(self):
        sanitized = SecurityValidator.sanitize_log_value("x" * 150, max_length=100)
        assert len(sanitized) == 103
        assert sanitized.endswith("...")

    def test_sanitize_log_value_non_string(self):
        assert SecurityValidator.sanitize_log_value(12345, max_length=3) == "123"


class TestSecurityLogger(SimpleTestCase):
    """Test security logging."""

    @patch("project.security.utils.logger")
    def test_log_security_event(self, mock_logger):
        SecurityLogger.log_security_event(
            event_type="TEST_EVENT",
            details="Test details",
            context={"attribute": "src", "count": 2},
            severity="ERROR",
        )

        mock_logger.log.assert_called_once()
        level, message = mock_logger.log.call_args[0]
        assert level == logging.ERROR
        assert "SECURITY_EVENT: TEST_EVENT - Test details" in message
        assert "'attribute': 'src'" in message
        assert "'count': '2'" in message

    @patch("project.security.utils.logger")
    def test_unknown_severity_defaults_to_warning(self, mock_logger):
        SecurityLogger.log_security_event("E", "d", severity="NOPE")
        assert mock_logger.log.call_args[0][0] == logging.WARNING

    @patch("project.security.utils.SecurityLogger.log_security_event")
    def test_log_rejected_script(self, mock_log_event):
        SecurityLogger.log_rejected_script(
            reason="placeholder_collision",
            attribute="src",
            value="self-reference-proxy.js",
            request_path="/page/",
        )

        mock_log_event.assert_called_once()
        kwargs = mock_log_event.call_args.kwargs
        assert kwargs["event_type"] == "PLACEHOLDER_COLLISION_REJECTED"
        assert kwargs["details"] == "Rejected script: placeholder collision"
        assert kwargs["context"]["path"] == "/page/"
        assert kwargs["severity"] == "WARNING"
