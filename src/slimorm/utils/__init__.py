"""
Utility helpers shared across slimorm packages.
"""

from .logging import configure_logging, get_logger, log_duration
from .naming import camel_to_snake

__all__ = ["camel_to_snake", "configure_logging", "get_logger", "log_duration"]
