"""Configuration management for tsscaffold."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PACKAGE_MANAGER = "yarn"
DEFAULT_LICENSE = "CC-BY-1.0"
DEFAULT_VERSION = "1.0.0"
DEFAULT_MAIN_ENTRY = "./dist/index.js"


class ScaffoldSettings(BaseSettings):
    """tsscaffold configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="TSSCAFFOLD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Package installation
    package_manager: str = Field(default=DEFAULT_PACKAGE_MANAGER)

    # package.json fallbacks, only used when the service info leaves them empty
    default_license: str = Field(default=DEFAULT_LICENSE)
    default_version: str = Field(default=DEFAULT_VERSION)
    main_entry: str = Field(default=DEFAULT_MAIN_ENTRY)

    # Owning user for the `author` field
    user_name: str | None = Field(default=None)
    user_email: str | None = Field(default=None)

    log_level: str = Field(default="INFO")


def get_settings() -> ScaffoldSettings:
    """Get tsscaffold settings instance."""
    return ScaffoldSettings()
