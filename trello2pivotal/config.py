from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def normalize_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {value!r} (expected one of {', '.join(LOG_LEVELS)})")
    return level


class ConverterSettings(BaseSettings):
    source_path: Optional[Path] = Field(None, alias="TRELLO2PIVOTAL_SOURCE_PATH")
    target_path: Optional[Path] = Field(None, alias="TRELLO2PIVOTAL_TARGET_PATH")
    log_level: str = Field("INFO", alias="TRELLO2PIVOTAL_LOG_LEVEL")
    log_file: Optional[Path] = Field(None, alias="TRELLO2PIVOTAL_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        return normalize_log_level(value)
