"""
Configuration for the Recipe Normalizer.

Settings come from the environment, optionally seeded from a .env file.
"""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .const import (
    CONF_API_KEY,
    CONF_MAX_TEXT_LENGTH,
    CONF_MODELS,
    CONF_TIMEOUT,
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_MODELS,
    DEFAULT_TIMEOUT,
)

_LOGGER = logging.getLogger(__name__)


class Settings(BaseModel):
    """Runtime settings.

    Attributes:
        api_key: Gemini API key; empty disables the structuring step
        models: Model names tried in order
        timeout: Request timeout in seconds
        max_text_length: Maximum characters of raw text sent to the model
    """

    api_key: str = ""
    models: list[str] = Field(default_factory=lambda: list(DEFAULT_MODELS))
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_text_length: int = Field(default=DEFAULT_MAX_TEXT_LENGTH, gt=0)


def _read_number(name: str, default: float, cast) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        number = cast(value)
    except ValueError:
        number = 0
    if not number > 0:
        _LOGGER.warning("Ignoring invalid %s=%r, using %s", name, value, default)
        return default
    return number


def load_settings(env_file: str | None = None) -> Settings:
    """Load settings from the environment.

    Args:
        env_file: Optional path to a .env file; the default lookup is used otherwise

    Returns:
        Settings built from the environment
    """
    load_dotenv(env_file)

    models = [model.strip() for model in os.getenv(CONF_MODELS, "").split(",") if model.strip()]

    return Settings(
        api_key=os.getenv(CONF_API_KEY, "").strip(),
        models=models or list(DEFAULT_MODELS),
        timeout=_read_number(CONF_TIMEOUT, DEFAULT_TIMEOUT, float),
        max_text_length=_read_number(CONF_MAX_TEXT_LENGTH, DEFAULT_MAX_TEXT_LENGTH, int),
    )
