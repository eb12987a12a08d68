# Path: config/settings.py
# Purpose: Provide typed application configuration and its on-disk JSON file.
# Layer: config.
# Details: Settings supply fallback values for every per-run argument; the file is created on first use.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from core.errors import ConfigError
from core.models.domain import Range, ScoreFilter

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "IMGSIFT_CONFIG"
CONFIG_FILE_NAME = "config.json"
APP_DIR_NAME = "imgsift"


class RangeSettings(BaseModel):
    """Inclusive bound pair as stored in the config file."""

    min: Optional[int] = Field(default=None, ge=0, description="Smallest accepted value, inclusive.")
    max: Optional[int] = Field(default=None, ge=0, description="Largest accepted value, inclusive.")

    @model_validator(mode="before")
    @classmethod
    def parse_text(cls, value: Any) -> Any:
        """Accept the ``MIN..MAX`` shorthand in place of an object."""

        if isinstance(value, str):
            return Range.parse(value).to_dict()
        return value

    @model_validator(mode="after")
    def check_order(self) -> "RangeSettings":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min {self.min} exceeds max {self.max}")
        return self

    def to_range(self) -> Range:
        return Range(min=self.min, max=self.max)


class AppSettings(BaseModel):
    """Defaults applied to every run when the matching argument is not given."""

    root_images_dir: Optional[Path] = Field(default=None, description="Root folder scanned for images.")
    metadata_path: Optional[Path] = Field(default=None, description="JSON file holding per-image metadata.")
    score_filters: Optional[List[str]] = Field(
        default=None, description="Score filter expressions such as 'score >= 5.0', combined with AND."
    )
    width_range: Optional[RangeSettings] = Field(default=None, description="Accepted image widths in pixels.")
    height_range: Optional[RangeSettings] = Field(default=None, description="Accepted image heights in pixels.")
    log_level: str = Field(default="WARNING", description="Verbosity level for application logs.")

    @field_validator("score_filters")
    @classmethod
    def check_score_filters(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        if value is not None:
            for expression in value:
                ScoreFilter.parse(expression)
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def create_default(cls) -> "AppSettings":
        return cls()

    def parsed_score_filters(self) -> Optional[List[ScoreFilter]]:
        if self.score_filters is None:
            return None
        return [ScoreFilter.parse(expression) for expression in self.score_filters]

    def to_json(self) -> str:
        return self.model_dump_json(indent=2) + "\n"


def default_config_path() -> Path:
    """Return the config file location, honouring ``IMGSIFT_CONFIG`` and ``XDG_CONFIG_HOME``."""

    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    base = os.environ.get("XDG_CONFIG_HOME")
    config_home = Path(base) if base else Path.home() / ".config"
    return config_home / APP_DIR_NAME / CONFIG_FILE_NAME


def ensure_config_file(path: Path) -> bool:
    """Write a default config file at ``path`` if none exists; return True when one was created."""

    if path.exists():
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(AppSettings.create_default().to_json(), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"could not create config file: {exc}", path) from exc
    logger.info("config file created at %s", path)
    return True


def load_settings(path: Path) -> AppSettings:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"could not read config file: {exc}", path) from exc
    try:
        return AppSettings.model_validate_json(text)
    except ValidationError as exc:
        raise ConfigError(f"invalid config file: {exc}", path) from exc


__all__ = [
    "AppSettings",
    "CONFIG_ENV_VAR",
    "RangeSettings",
    "default_config_path",
    "ensure_config_file",
    "load_settings",
]
