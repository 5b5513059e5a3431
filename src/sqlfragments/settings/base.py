import logging
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlfragments.constants import DEFAULT_SUBQUERY_BORDERS


class BuilderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SQLFRAGMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="dev",
        description="Deployment environment name stamped onto every log record (e.g., dev, qa, prod)"
    )

    log_level: str = Field(
        default="INFO",
        description="Log level for the sqlfragments logger (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    json_logs: bool = Field(
        default=True,
        description="Emit JSON log records. When false, a plain text format is used."
    )

    subquery_borders: Tuple[str, str] = Field(
        default=DEFAULT_SUBQUERY_BORDERS,
        description=(
            "Opening and closing text placed around a statement embedded as a sub-query. "
            "Used when get_as_subquery() is called without borders or with an invalid pair."
        )
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the log level is a standard level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Unknown log level: {v}. Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return level
