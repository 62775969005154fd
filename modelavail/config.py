"""
Configuration settings for ModelAvail.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .utils.common import get_logger, load_config_file

logger = get_logger(__name__)


def _env_number(name: str, default, cast=float):
    """Read a numeric environment variable, keeping the default when it does not parse."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


# Logging configuration
LOG_FILE = Path(os.getenv("MODELAVAIL_LOG_FILE", "modelavail.log"))

# Availability service configuration
MODEL_AVAILABILITY_ENDPOINT = "/model-availability"

# Display configuration
DEFAULT_LOCALE = os.getenv("MODELAVAIL_LOCALE", "en")

# Reference service configuration
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 1235
DEFAULT_COOLDOWN_SECONDS = _env_number("MODELAVAIL_COOLDOWN_SECONDS", 300, int)

CONFIG_FILE = "modelavail.config.json"


@dataclass
class GatewaySettings:
    """Resolved connection settings for the availability service."""

    base_url: str = "http://127.0.0.1:1235"
    api_key: Optional[str] = None
    timeout: float = 30.0
    locale: str = "en"


def load_settings(config_path: str = CONFIG_FILE) -> GatewaySettings:
    """
    Resolve gateway settings.

    Priority order:
    1. Environment variables
    2. modelavail.config.json in current directory
    3. Defaults

    Args:
        config_path: Path to the JSON configuration file

    Returns:
        GatewaySettings instance
    """
    settings = GatewaySettings()

    file_config = load_config_file(config_path)
    if file_config:
        settings.base_url = file_config.get("api_base", settings.base_url)
        settings.api_key = file_config.get("api_key", settings.api_key)
        settings.locale = file_config.get("locale", settings.locale)
        if "timeout" in file_config:
            try:
                settings.timeout = float(file_config["timeout"])
            except (TypeError, ValueError):
                logger.warning(
                    f"Ignoring invalid timeout in {config_path}: {file_config['timeout']!r}"
                )

    if os.environ.get("MODELAVAIL_API_BASE"):
        settings.base_url = os.environ["MODELAVAIL_API_BASE"]
    if os.environ.get("MODELAVAIL_API_KEY"):
        settings.api_key = os.environ["MODELAVAIL_API_KEY"]
    if os.environ.get("MODELAVAIL_LOCALE"):
        settings.locale = os.environ["MODELAVAIL_LOCALE"]
    settings.timeout = _env_number("MODELAVAIL_TIMEOUT", settings.timeout)

    settings.base_url = settings.base_url.rstrip("/")
    return settings
