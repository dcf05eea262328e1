"""Runtime settings loaded from `.env` and environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reform.exceptions import SettingsError
from reform.typing.enums import RendererKind


class Settings(BaseSettings):
    """Package settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "reform"
    app_env: str = Field(
        default="dev",
        validation_alias="APP_ENV",
        description="Application environment, e.g. 'dev', 'prod'.",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level, e.g. 'INFO', 'DEBUG'.",
    )
    log_json: bool = Field(
        default=True,
        validation_alias="LOG_JSON",
        description="Enable JSON formatted logs.",
    )
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="File path for log output.",
    )

    default_renderer: RendererKind = Field(
        default=RendererKind.OL,
        validation_alias="DEFAULT_RENDERER",
        description="Renderer given to newly registered form types.",
    )

    @field_validator("default_renderer", mode="before")
    @classmethod
    def parse_renderer_kind(cls, value: object) -> object:
        """Accept renderer names regardless of case.

        Args:
            value: Raw setting value.

        Returns:
            object: Parsed renderer kind, or the raw value for pydantic to reject.
        """
        if isinstance(value, str):
            try:
                return RendererKind.from_str(value)
            except ValueError:
                return value
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance.

    Raises:
        SettingsError: If settings cannot be loaded or validated.

    Returns:
        Settings: The loaded settings instance.
    """
    try:
        return Settings()
    except Exception as exc:
        raise SettingsError(exc=exc) from exc
