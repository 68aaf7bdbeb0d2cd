"""
Configuration for json-localization

Type-safe settings using Pydantic Settings. Values bind from environment
variables prefixed with ``JSON_LOCALIZATION_`` (or a ``.env`` file), and can
be overridden by the host through ``add_json_localization(setup_action=...)``.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from json_localization.utils.culture import get_system_culture, normalize_culture


DEFAULT_RESOURCES_PATH = "Resources"


class LocalizationSettings(BaseSettings):
    """JSON localization settings"""

    model_config = SettingsConfigDict(
        env_prefix="JSON_LOCALIZATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    resources_path: Optional[str] = Field(
        default=DEFAULT_RESOURCES_PATH,
        description="Relative path under the application base directory where resource files are located"
    )
    root_namespace: Optional[str] = Field(
        default=None,
        description="Prefix stripped from type-derived resource names (defaults to the entry-point name)"
    )
    base_directory: Optional[str] = Field(
        default=None,
        description="Application base directory (defaults to the current working directory)"
    )
    default_culture: Optional[str] = Field(
        default=None,
        description="Process-level default UI culture (defaults to the operating system locale)"
    )

    @field_validator("default_culture", mode="before")
    @classmethod
    def normalize_default_culture(cls, v):
        if v is None:
            return None
        return normalize_culture(v)

    def resources_root(self) -> Path:
        """Absolute directory that resource names are resolved against"""
        base = Path(self.base_directory) if self.base_directory else Path.cwd()
        return base / (self.resources_path or DEFAULT_RESOURCES_PATH)

    def effective_default_culture(self) -> str:
        """Configured default culture, else the operating system one"""
        if self.default_culture is not None:
            return self.default_culture
        return get_system_culture()


settings = LocalizationSettings()


def get_settings() -> LocalizationSettings:
    """
    Get the global settings instance

    Can be used with FastAPI's Depends() for dependency injection.

    Returns:
        LocalizationSettings: The global settings instance
    """
    return settings


def reload_settings() -> LocalizationSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        LocalizationSettings: New settings instance with reloaded values
    """
    global settings
    settings = LocalizationSettings()
    return settings
