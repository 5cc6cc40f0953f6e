"""Project configuration model for quicktrace.

Captures quicktrace.yaml fields with defaults matching the classic
visualizer: ten random values between 1 and 100.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

CONFIG_FILENAME = "quicktrace.yaml"

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ProjectConfig(BaseModel):
    """Project-level configuration loaded from quicktrace.yaml."""

    model_config = {"extra": "forbid"}

    default_size: int = Field(default=10, ge=1, le=500)
    min_value: int = 1
    max_value: int = 100
    speed_ms: int = Field(default=300, ge=10, le=5000)
    bar_height: int = Field(default=10, ge=1, le=50)
    seed: int | None = None
    log_level: LogLevelName = "WARNING"

    @model_validator(mode="after")
    def _check_value_range(self) -> "ProjectConfig":
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must not exceed max_value ({self.max_value})"
            )
        return self


def find_project_root(start: Path | None = None) -> Path:
    """Return the nearest directory at or above ``start`` holding quicktrace.yaml.

    The CLI calls this so the visualizer picks up array size, value range
    and playback speed from the directory it is run in or any parent. When
    no config file exists anywhere up the tree the current directory is
    used, and every setting keeps its default.
    """
    directory = (start or Path.cwd()).resolve()
    if directory.is_file():
        directory = directory.parent
    for candidate in (directory, *directory.parents):
        if (candidate / CONFIG_FILENAME).is_file():
            return candidate
    return Path.cwd()


def load_project_config(project_root: Path | None = None) -> ProjectConfig:
    """Read visualizer settings from ``<project_root>/quicktrace.yaml``.

    A missing or empty file means "use the defaults": ten values between
    1 and 100, 300 ms between playback steps, unseeded pivots.

    Raises:
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If a setting is unknown or out of range,
            or ``min_value`` exceeds ``max_value``.
    """
    root = project_root if project_root is not None else find_project_root()
    config_path = root / CONFIG_FILENAME
    if not config_path.is_file():
        return ProjectConfig()

    settings = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    return ProjectConfig.model_validate(settings or {})
