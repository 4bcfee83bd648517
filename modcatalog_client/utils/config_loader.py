"""
Configuration loader utility.

Loads the client configuration from environment variables (and a ``.env``
file when present) with sensible defaults.
"""

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import DEFAULT_BASE_URL, CatalogClientConfig

_NUMERIC_SETTINGS = {
    "MODCATALOG_TIMEOUT": ("timeout", float),
    "MODCATALOG_STALE_TIME": ("stale_time", int),
    "MODCATALOG_GC_TIME": ("gc_time", int),
    "MODCATALOG_RETRY": ("retry", int),
    "MODCATALOG_RETRY_DELAY": ("retry_delay", float),
    "MODCATALOG_DEFAULT_PAGE_SIZE": ("default_page_size", int),
}


def _read_number(name: str, cast) -> Optional[Any]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return cast(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")


def load_config() -> CatalogClientConfig:
    """
    Load configuration from environment variables with defaults.

    Environment variables (all optional):
    - MODCATALOG_BASE_URL (default: https://api.curseforge.com/v1)
    - MODCATALOG_LOG_LEVEL (debug, info, warn, error; default: info)
    - MODCATALOG_TIMEOUT (seconds, default: 30)
    - MODCATALOG_STALE_TIME (seconds, default: 300)
    - MODCATALOG_GC_TIME (seconds, default: 600)
    - MODCATALOG_RETRY (0 or 1, default: 1)
    - MODCATALOG_RETRY_DELAY (seconds, default: 1)
    - MODCATALOG_DEFAULT_PAGE_SIZE (10, 20 or 50; default: 20)
    - MODCATALOG_CREDENTIAL_FILE (path of the persisted API key)

    Returns:
        CatalogClientConfig instance

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    load_dotenv()

    values: Dict[str, Any] = {
        "base_url": os.environ.get("MODCATALOG_BASE_URL") or DEFAULT_BASE_URL,
    }

    log_level = os.environ.get("MODCATALOG_LOG_LEVEL", "info").lower()
    if log_level not in ["debug", "info", "warn", "error"]:
        log_level = "info"
    values["log_level"] = log_level

    for env_name, (field_name, cast) in _NUMERIC_SETTINGS.items():
        value = _read_number(env_name, cast)
        if value is not None:
            values[field_name] = value

    credential_file = os.environ.get("MODCATALOG_CREDENTIAL_FILE")
    if credential_file:
        values["credential_file"] = credential_file

    try:
        return CatalogClientConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")
