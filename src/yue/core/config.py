import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = Field("INFO", description="Level of the package logger.")
    LOG_FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string handed to logging.Formatter.",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, level: str) -> str:
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{level}'. Expected one of {', '.join(LOG_LEVELS)}."
            )
        return level

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        level: Optional[str] = os.getenv("YUE_LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level

        log_format = os.getenv("YUE_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        return cls(**values)
