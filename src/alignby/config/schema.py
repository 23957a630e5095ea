"""Pydantic model for resolved settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from alignby.config.defaults import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_MAX_WORKERS,
    DEFAULT_ROOT_MARKERS,
    DEFAULT_SQUEEZE,
)
from alignby.errors.exceptions import ConfigError


class Settings(BaseModel):
    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, ge=0)
    root_markers: list[str] = Field(default_factory=lambda: list(DEFAULT_ROOT_MARKERS))
    squeeze: bool = DEFAULT_SQUEEZE
    max_workers: int = Field(default=DEFAULT_MAX_WORKERS, ge=1)
    log_level: str = DEFAULT_LOG_LEVEL
    model_config = {"extra": "ignore"}

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> Settings:
        """Validate a merged config dict, raising ConfigError on bad values."""
        try:
            return cls(**raw)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            raise ConfigError(f"Invalid config value for '{key}': {first['msg']}", key=key) from e
