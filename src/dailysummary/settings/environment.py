"""Settings read from the environment."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GLOBAL_CONFIG = Path.home() / ".daily-summary" / "config.json"


class EnvironmentSettings(BaseSettings):
    """Environment variables (and a .env file in the working directory)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Provider keys, looked up by ProviderSpec.env_var
    openai_api_key: Optional[str] = None
    perplexity_api_key: Optional[str] = None

    # Global settings file location
    daily_summary_config: Optional[Path] = None

    def api_key_for(self, env_var: str) -> Optional[str]:
        """Return the value of a provider key variable, None if unset or blank."""
        value = getattr(self, env_var.lower(), None)
        return value or None

    @property
    def global_config_path(self) -> Path:
        return self.daily_summary_config or DEFAULT_GLOBAL_CONFIG
