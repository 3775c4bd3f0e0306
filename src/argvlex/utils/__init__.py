"""Utility modules for argvlex.

Provides:
- logger: get_logger for logging
"""

from argvlex.utils.logger import get_logger

__all__ = ["get_logger"]
