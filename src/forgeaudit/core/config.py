# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RECORDER_KINDS = ("log", "queue")
LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FORGEAUDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Audit recording
    audit_enabled: bool = True
    audit_recorder: str = "log"  # "log" or "queue"
    audit_log_dir: str = ""  # JSONL output directory; empty disables file output
    audit_queue_size: int = 1000

    @field_validator("audit_recorder", mode="before")
    @classmethod
    def _parse_audit_recorder(cls, v: object) -> str:
        value = str(v).strip().lower()
        if value not in RECORDER_KINDS:
            raise ValueError(f"audit_recorder must be one of {', '.join(RECORDER_KINDS)}")
        return value

    @field_validator("audit_queue_size")
    @classmethod
    def _check_queue_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("audit_queue_size must be positive")
        return v

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def _parse_log_format(cls, v: object) -> str:
        value = str(v).strip().lower()
        if value not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return value


def get_settings() -> Settings:
    return Settings()
