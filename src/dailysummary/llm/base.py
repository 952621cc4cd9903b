"""Base class for LLM providers."""

from abc import ABC, abstractmethod
from typing import Any

DEFAULT_MAX_TOKENS = 500
DEFAULT_TEMPERATURE = 0.4


class BaseLLMProvider(ABC):
    """Abstract base class for chat-completion providers."""

    def __init__(self, api_key: str, model: str, **kwargs: Any) -> None:
        """Initialize the LLM provider.

        Args:
            api_key: API key for the provider
            model: Model name to use
            **kwargs: Additional provider-specific parameters
        """
        self.api_key = api_key
        self.model = model
        self.config = kwargs

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        **kwargs: Any,
    ) -> str:
        """Generate a completion from the LLM.

        Args:
            prompt: The prompt to send to the LLM
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature (0.0-1.0)
            **kwargs: Additional provider-specific parameters

        Returns:
            The generated text completion, stripped of surrounding whitespace

        Raises:
            ProviderError: If the API call fails or the response is malformed
        """
        pass
