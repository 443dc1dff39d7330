"""
Utilities: logging, error classification, output formatting and the stats
document adapter.
"""

from .error_handling import ConfigurationError, DepcycleError, GraphFormatError
from .logging_config import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "DepcycleError",
    "GraphFormatError",
    "configure_logging",
    "get_logger",
]
