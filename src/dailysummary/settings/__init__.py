"""Layered settings: command line, project file, global file, environment."""

from dailysummary.settings.environment import EnvironmentSettings
from dailysummary.settings.resolver import ConfigResolver
from dailysummary.settings.store import (
    PROJECT_CONFIG_FILENAME,
    ConfigStore,
    find_project_config,
    mask_secret,
    redact,
)

__all__ = [
    "ConfigResolver",
    "ConfigStore",
    "EnvironmentSettings",
    "PROJECT_CONFIG_FILENAME",
    "find_project_config",
    "mask_secret",
    "redact",
]
