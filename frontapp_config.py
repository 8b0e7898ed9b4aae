# frontapp_config.py - settings resolved from environment variables
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_ENDPOINT = "https://api2.frontapp.com"
DEFAULT_TIMEOUT = 10

_FALSEY = {"0", "false", "no", "off"}


@dataclass
class FrontAppSettings:
    api_key: Optional[str]
    api_endpoint: str = DEFAULT_API_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    log_level: str = "INFO"


def _env_bool(value, default=True):
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() not in _FALSEY


def load_settings(environ=None) -> FrontAppSettings:
    """Read FRONTAPP_* variables (override via env) into FrontAppSettings."""
    env = os.environ if environ is None else environ

    raw_timeout = env.get("FRONTAPP_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"FRONTAPP_TIMEOUT must be a number, got {raw_timeout!r}")
    if timeout <= 0:
        raise ValueError(f"FRONTAPP_TIMEOUT must be positive, got {raw_timeout!r}")

    return FrontAppSettings(
        api_key=env.get("FRONTAPP_API_KEY") or None,
        api_endpoint=env.get("FRONTAPP_API_ENDPOINT", DEFAULT_API_ENDPOINT).rstrip("/"),
        timeout=timeout,
        verify_ssl=_env_bool(env.get("FRONTAPP_VERIFY_SSL")),
        log_level=env.get("FRONTAPP_LOG_LEVEL", "INFO").upper(),
    )
