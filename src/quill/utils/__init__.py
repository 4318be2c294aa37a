"""Utility modules for Quill.

Provides:
- logger: get_logger for logging
"""

from quill.utils.logger import get_logger

__all__ = [
    "get_logger",
]
