# src/breeze_balance/config.py
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from breeze_balance.errors import ConfigError

# Environment keys
ENV_ENDPOINT_URL = "BALANCE_ENDPOINT_URL"
ENV_ENDPOINT_REFERRER = "BALANCE_ENDPOINT_REFERRER"
ENV_REQUEST_TIMEOUT = "BALANCE_REQUEST_TIMEOUT_SECONDS"
ENV_LOG_LEVEL = "LOG_LEVEL"

# Per-request timeout (seconds) for the balance page POST
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0

LOG_LEVEL = os.getenv(ENV_LOG_LEVEL, "INFO")

# Headers of a browser submitting the balance-check form by hand.
# The portal answers programmatic-looking requests differently.
FORM_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Content-Type": "application/x-www-form-urlencoded",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "same-origin",
    "Sec-Fetch-User": "?1",
}

# Click coordinates of the image submit button on the form
SUBMIT_BUTTON_X = "41"
SUBMIT_BUTTON_Y = "4"


@dataclass(frozen=True)
class Settings:
    endpoint_url: str
    referrer: str
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS


def _required(environ: Mapping[str, str], key: str) -> str:
    value = (environ.get(key) or "").strip()
    if not value:
        raise ConfigError(f"Missing required configuration value: {key}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read endpoint settings from the environment.

    Raises ConfigError when a required value is missing or the timeout is not a
    positive number. Meant to be called once at startup.
    """
    env = os.environ if environ is None else environ

    raw_timeout = env.get(ENV_REQUEST_TIMEOUT)
    if raw_timeout is None or not raw_timeout.strip():
        timeout = DEFAULT_REQUEST_TIMEOUT_SECONDS
    else:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"{ENV_REQUEST_TIMEOUT} must be a number, got {raw_timeout!r}") from e
        if timeout <= 0:
            raise ConfigError(f"{ENV_REQUEST_TIMEOUT} must be positive, got {raw_timeout!r}")

    return Settings(
        endpoint_url=_required(env, ENV_ENDPOINT_URL),
        referrer=_required(env, ENV_ENDPOINT_REFERRER),
        request_timeout=timeout,
    )
