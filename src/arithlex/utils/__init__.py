"""Utility modules for arithlex.

Provides:
- logger: get_logger for logging
"""

from arithlex.utils.logger import get_logger

__all__ = ["get_logger"]
