"""Settings file persistence.

A settings file is a flat JSON object keyed by option name, for example::

    {
      "api_provider": "openai",
      "openai_api_key": "sk-...",
      "openai_model": "gpt-4o-mini",
      "report_type": "all",
      "copy_to_clipboard": false
    }

The global file lives in ~/.daily-summary/config.json. A project can carry
the same keys in a .daily-summary.json file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import structlog

from dailysummary.errors import ConfigError

logger = structlog.get_logger(__name__)

PROJECT_CONFIG_FILENAME = ".daily-summary.json"
SECRET_SUFFIX = "_api_key"
MASK = "********"


def is_secret(key: str) -> bool:
    return key.endswith(SECRET_SUFFIX)


def mask_secret(value: Any) -> str:
    """Mask a secret for display. The literal value never appears in the result."""
    text = str(value or "")
    if len(text) <= 12:
        return MASK
    return f"{text[:3]}{MASK}{text[-4:]}"


def redact(settings: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of a settings document with every secret masked."""
    return {
        key: mask_secret(value) if is_secret(key) and value else value
        for key, value in settings.items()
    }


def read_settings_file(path: Path) -> Dict[str, Any]:
    """Read a settings file.

    Args:
        path: Path to the JSON settings file

    Returns:
        The settings, or an empty dict if the file does not exist

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object
    """
    if not path.exists():
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a JSON object")

    logger.debug("settings_file_loaded", path=str(path), keys=sorted(data))
    return data


def find_project_config(start: Path) -> Optional[Path]:
    """Find the nearest project settings file in `start` or one of its parents."""
    start = Path(start).resolve()
    for directory in (start, *start.parents):
        candidate = directory / PROJECT_CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class ConfigStore:
    """Reads and writes the global settings file.

    Writes are non-destructive: keys not being updated are kept as they are.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Location of the global settings file
        """
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        return read_settings_file(self.path)

    def redacted(self) -> Dict[str, Any]:
        """Load the settings with every secret masked."""
        return redact(self.load())

    def update(self, answers: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge answers into the stored settings and save them.

        Args:
            answers: New values. Keys whose value is None are left untouched.

        Returns:
            The merged settings that were written
        """
        merged = self.load()
        merged.update({key: value for key, value in answers.items() if value is not None})
        self._write(merged)
        logger.info("settings_saved", path=str(self.path), keys=sorted(merged))
        return merged

    def _write(self, settings: Mapping[str, Any]) -> None:
        """Write the settings using a temporary file and an atomic rename."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=".config_", suffix=".json.tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(dict(settings), f, indent=2, sort_keys=True)
                f.write("\n")

            os.replace(temp_path, self.path)
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise ConfigError(f"Could not write settings file {self.path}: {e}") from e
