"""Configuration management for actionkit."""

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from actionkit.errors import ConfigurationError

# Platform cap on reprompts played when the user stays silent.
PLATFORM_NO_INPUT_PROMPT_LIMIT = 3


class Settings(BaseSettings):
    """Library settings."""

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_profile: Literal["default", "rich"] = Field(default="default", description="Log output profile")

    # Response Configuration
    max_no_input_prompts: int = Field(
        default=PLATFORM_NO_INPUT_PROMPT_LIMIT,
        ge=0,
        le=PLATFORM_NO_INPUT_PROMPT_LIMIT,
        description="Maximum number of no-input prompts sent to the platform",
    )
    no_input_overflow: Literal["truncate", "reject"] = Field(
        default="truncate",
        description="What to do when more no-input prompts are set than allowed",
    )

    model_config = SettingsConfigDict(
        env_prefix="ACTIONKIT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get library settings.

    Returns:
        Settings instance loaded from the environment and an optional .env file

    Raises:
        ConfigurationError: An ACTIONKIT_* value fails validation
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid actionkit settings: {exc}") from exc
