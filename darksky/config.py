# ABOUTME: Environment-driven settings for the Dark Sky client.
# ABOUTME: Reads the API token, base URL and timeout from the process environment or a .env file.

import os

from dotenv import load_dotenv
from pydantic import BaseModel

from darksky.errors import ConfigError

API_URL = "https://api.darksky.net"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseModel):
    """Connection settings for the forecast API."""

    token: str
    base_url: str = API_URL
    timeout: float = DEFAULT_TIMEOUT


def load_settings() -> Settings:
    """Load settings, raising ConfigError when no API token is configured.

    DARKSKY_TOKEN is preferred; FORECAST_TOKEN is accepted for older setups.
    """
    load_dotenv()

    token = os.environ.get("DARKSKY_TOKEN") or os.environ.get("FORECAST_TOKEN")
    if not token:
        raise ConfigError("Set DARKSKY_TOKEN (or FORECAST_TOKEN) to your Dark Sky API key")

    timeout = os.environ.get("DARKSKY_TIMEOUT")
    try:
        timeout_value = float(timeout) if timeout else DEFAULT_TIMEOUT
    except ValueError as e:
        raise ConfigError(f"DARKSKY_TIMEOUT must be a number of seconds, got {timeout!r}") from e

    return Settings(
        token=token,
        base_url=os.environ.get("DARKSKY_API_URL", API_URL).rstrip("/"),
        timeout=timeout_value,
    )
