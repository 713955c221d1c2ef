"""
Configuration for the Runware generation client.

Values come from the environment or a local .env file.
"""

import logging
import sys
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_URL = "https://api.runware.ai/v1"

# Values that show up when a .env template was copied but never filled in
PLACEHOLDER_KEYS = {
    "",
    "undefined",
    "null",
    "none",
    "your-api-key",
    "your-api-key-here",
    "your_runware_api_key",
    "changeme",
}


def is_placeholder_key(api_key: Optional[str]) -> bool:
    """Return True when the credential is missing or an obvious placeholder."""
    if api_key is None:
        return True
    return api_key.strip().lower() in PLACEHOLDER_KEYS


class Settings(BaseSettings):
    """
    Runtime settings for the generation client.

    The API key and endpoint use the RUNWARE_* names shared with other
    Runware tooling; everything else is read with a RESTYLE_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="RESTYLE_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # Runware
    api_key: Optional[str] = Field(None, validation_alias="RUNWARE_API_KEY")
    api_url: str = Field(DEFAULT_API_URL, validation_alias="RUNWARE_API_URL")

    # Retry policy
    attempt_timeout: float = Field(60.0, gt=0)
    max_attempts: int = Field(3, ge=1)

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read RUNWARE_API_KEY, RUNWARE_API_URL and the RESTYLE_* variables."""
        return cls()

    @property
    def has_api_key(self) -> bool:
        return not is_placeholder_key(self.api_key)


def setup_logging(level: Optional[str] = None) -> None:
    """Attach a console handler to the package logger."""
    level_name = (level or Settings.from_env().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger("restyle")
    logger.setLevel(log_level)

    if not any(getattr(h, "_restyle_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        handler._restyle_handler = True
        logger.addHandler(handler)
