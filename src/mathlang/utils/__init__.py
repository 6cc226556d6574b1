"""Utility modules for mathlang.

Provides:
- logger: get_logger for logging
"""

from mathlang.utils.logger import get_logger

__all__ = [
    "get_logger",
]
