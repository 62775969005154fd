"""
Common utility functions and decorators for ModelAvail.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Callable
from functools import wraps


# Logger setup utility
def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with consistent setup."""
    return logging.getLogger(name)


# Common configuration loading
def load_config_file(config_path: str = "modelavail.config.json") -> Dict[str, Any]:
    """
    Load configuration from JSON file with error handling.

    Args:
        config_path: Path to the configuration file

    Returns:
        Dictionary containing configuration data, empty dict if file doesn't exist
    """
    logger = get_logger(__name__)
    config_file = Path(config_path)

    if not config_file.exists():
        return {}

    try:
        with open(config_file) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {config_path}: expected a JSON object")
        return {}
    return data


# Common error logging for gateway operations
def log_gateway_errors(operation: str) -> Callable:
    """
    Decorator that traces failures of an async gateway operation and re-raises.

    Callers own error reporting, so this only logs at debug level.

    Args:
        operation: Description of the operation being performed
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            logger = get_logger(__name__)
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.debug(f"Error in {operation}: {e}")
                raise

        return wrapper

    return decorator
