"""Layered configuration resolution.

Each option is resolved on its own, taking the first value found in:

1. the command line
2. the project settings file (.daily-summary.json, nearest to the cwd)
3. the global settings file (~/.daily-summary/config.json)
4. the environment (API keys only)
5. the built-in default
"""

import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import structlog

from dailysummary.errors import ConfigError, MissingCredentialError
from dailysummary.extraction import parse_report_date
from dailysummary.llm.providers import DEFAULT_PROVIDER, get_provider_spec
from dailysummary.models import CliOverrides, EffectiveConfig, ReportType
from dailysummary.settings.environment import EnvironmentSettings
from dailysummary.settings.store import ConfigStore, find_project_config, read_settings_file

logger = structlog.get_logger(__name__)

DEFAULT_REPORT_TYPE = ReportType.ALL
DEFAULT_COPY_TO_CLIPBOARD = False


class SettingsLayer:
    """One settings file, with type checks on the values it supplies."""

    def __init__(self, name: str, values: Dict[str, Any]) -> None:
        self.name = name
        self.values = values

    def get_str(self, key: str) -> Optional[str]:
        value = self.values.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' in {self.name} must be a string, got {value!r}")
        return value or None

    def get_bool(self, key: str) -> Optional[bool]:
        value = self.values.get(key)
        if value is None:
            return None
        if not isinstance(value, bool):
            raise ConfigError(f"'{key}' in {self.name} must be true or false, got {value!r}")
        return value


class ConfigResolver:
    """Builds the EffectiveConfig for one invocation."""

    def __init__(
        self,
        store: ConfigStore,
        project_file: Optional[Path] = None,
        environment: Optional[EnvironmentSettings] = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            store: Global settings file
            project_file: Project settings file, if one applies
            environment: Environment settings, loaded from the process
                environment when omitted
        """
        self.store = store
        self.project_file = project_file
        self.environment = environment if environment is not None else EnvironmentSettings()

    @classmethod
    def discover(
        cls,
        cwd: Optional[Path] = None,
        environment: Optional[EnvironmentSettings] = None,
    ) -> "ConfigResolver":
        """Create a resolver for the global file and the project file nearest to cwd."""
        environment = environment if environment is not None else EnvironmentSettings()
        return cls(
            store=ConfigStore(environment.global_config_path),
            project_file=find_project_config(cwd or Path.cwd()),
            environment=environment,
        )

    def _layers(self) -> List[SettingsLayer]:
        layers = []
        if self.project_file is not None:
            layers.append(SettingsLayer(str(self.project_file), read_settings_file(self.project_file)))
        layers.append(SettingsLayer(str(self.store.path), self.store.load()))
        return layers

    @staticmethod
    def _first_str(cli_value: Optional[str], layers: List[SettingsLayer], key: str) -> Tuple[Optional[str], str]:
        if cli_value:
            return cli_value, "cli"
        for layer in layers:
            value = layer.get_str(key)
            if value is not None:
                return value, layer.name
        return None, "default"

    def resolve(self, overrides: CliOverrides) -> EffectiveConfig:
        """Merge every source into one configuration.

        Args:
            overrides: Options given on the command line

        Returns:
            The effective configuration

        Raises:
            ConfigError: If an option is invalid
            MissingCredentialError: If no API key exists for the provider
            GitError: If the date is malformed
        """
        layers = self._layers()

        provider_name, source = self._first_str(overrides.api_provider, layers, "api_provider")
        spec = get_provider_spec(provider_name or DEFAULT_PROVIDER)
        logger.debug("option_resolved", option="api_provider", value=spec.name, source=source)

        model, source = self._first_str(overrides.model, layers, spec.model_setting)
        model = model or spec.default_model
        logger.debug("option_resolved", option="model", value=model, source=source)

        report_value, source = self._first_str(overrides.report_type, layers, "report_type")
        report_type = self._parse_report_type(report_value)
        logger.debug("option_resolved", option="report_type", value=report_type.value, source=source)

        copy_to_clipboard = overrides.copy_to_clipboard
        if copy_to_clipboard is None:
            copy_to_clipboard = next(
                (
                    value
                    for value in (layer.get_bool("copy_to_clipboard") for layer in layers)
                    if value is not None
                ),
                DEFAULT_COPY_TO_CLIPBOARD,
            )

        repo_path, day = self.resolve_target(overrides)

        # Resolved last; a day without commits runs without a key
        api_key, source = self._first_str(overrides.api_key, layers, spec.api_key_setting)
        if api_key is None:
            api_key, source = self.environment.api_key_for(spec.env_var), spec.env_var
        if not api_key:
            raise MissingCredentialError(spec.name, spec.env_var)
        logger.debug("option_resolved", option="api_key", source=source)

        return EffectiveConfig(
            api_provider=spec.name,
            api_key=api_key,
            model=model,
            report_type=report_type,
            copy_to_clipboard=copy_to_clipboard,
            repo_path=repo_path,
            date=day,
            output_file=overrides.output_file,
        )

    @staticmethod
    def resolve_target(overrides: CliOverrides) -> Tuple[Path, Optional[datetime.date]]:
        """Return the repository path and report day, which never come from settings files.

        Raises:
            GitError: If the date is malformed
        """
        repo_path = Path(overrides.repo_path or Path.cwd()).expanduser().resolve()
        day = parse_report_date(overrides.date) if overrides.date else None
        return repo_path, day

    @staticmethod
    def _parse_report_type(value: Optional[str]) -> ReportType:
        if value is None:
            return DEFAULT_REPORT_TYPE
        try:
            return ReportType(value.lower())
        except ValueError:
            choices = ", ".join(t.value for t in ReportType)
            raise ConfigError(f"Invalid report type '{value}'. Choose one of: {choices}") from None
