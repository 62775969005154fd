"""
Utility functions for ModelAvail.
"""

from .common import get_logger, load_config_file, log_gateway_errors
from .logging import log_request, log_response

__all__ = [
    "get_logger",
    "load_config_file",
    "log_gateway_errors",
    "log_request",
    "log_response",
]
