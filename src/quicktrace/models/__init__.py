"""quicktrace configuration models."""

from quicktrace.models.config import ProjectConfig, find_project_root, load_project_config

__all__ = [
    "ProjectConfig",
    "find_project_root",
    "load_project_config",
]
