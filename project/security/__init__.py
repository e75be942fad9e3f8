"""
Security utilities package for the script integrity project.

This package provides reusable security components including:
- Reserved marker detection
- Security logging
"""

from .utils import (
    SecurityValidator,
    SecurityLogger,
)

__all__ = [
    'SecurityValidator',
    'SecurityLogger',
]
