"""Registry of supported completion providers.

Every provider speaks the OpenAI chat-completion protocol, so a provider is
nothing more than a base URL, a default model and the environment variable
that carries its key. Adding a provider means adding an entry here.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from dailysummary.errors import ConfigError
from dailysummary.models import EffectiveConfig, ProviderConfig


class ProviderSpec(BaseModel):
    """Static description of a completion provider."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Provider id used on the command line and in settings files")
    base_url: Optional[str] = Field(None, description="API base URL, None for the client default")
    default_model: str = Field(..., description="Model used when none is configured")
    env_var: str = Field(..., description="Environment variable holding the API key")

    @property
    def api_key_setting(self) -> str:
        """Settings file key holding this provider's API key."""
        return f"{self.name}_api_key"

    @property
    def model_setting(self) -> str:
        """Settings file key holding this provider's model."""
        return f"{self.name}_model"


PROVIDERS: Dict[str, ProviderSpec] = {
    spec.name: spec
    for spec in (
        ProviderSpec(
            name="openai",
            default_model="gpt-4o-mini",
            env_var="OPENAI_API_KEY",
        ),
        ProviderSpec(
            name="perplexity",
            base_url="https://api.perplexity.ai",
            default_model="llama-3.1-sonar-small-128k-online",
            env_var="PERPLEXITY_API_KEY",
        ),
    )
}

DEFAULT_PROVIDER = "openai"


def provider_names() -> List[str]:
    return list(PROVIDERS)


def get_provider_spec(name: str) -> ProviderSpec:
    """Look up a provider by id.

    Raises:
        ConfigError: If the provider is not registered
    """
    try:
        return PROVIDERS[name.lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown API provider '{name}'. Available providers: {', '.join(provider_names())}"
        ) from None


def provider_config_for(config: EffectiveConfig) -> ProviderConfig:
    """Derive the provider call settings from a resolved configuration."""
    spec = get_provider_spec(config.api_provider)
    return ProviderConfig(
        provider=spec.name,
        base_url=spec.base_url,
        api_key=config.api_key,
        model=config.model,
    )
