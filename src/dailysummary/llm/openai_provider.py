"""OpenAI-compatible chat-completion provider."""

from typing import Any, Dict, Optional

import openai
import structlog
from openai import AsyncOpenAI

from dailysummary.errors import ProviderError
from dailysummary.llm.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseLLMProvider
from dailysummary.models import ProviderConfig

logger = structlog.get_logger(__name__)


class OpenAICompatibleProvider(BaseLLMProvider):
    """Provider for any API that speaks the OpenAI chat-completion protocol.

    OpenAI itself uses the client's default base URL; Perplexity and other
    compatible services only differ by base URL and model.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: Optional[str] = None,
        provider_name: str = "openai",
        **kwargs: Any,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: API key
            model: Model for completions
            base_url: API base URL, None for the OpenAI default
            provider_name: Provider id, used in error messages and logs
            **kwargs: Additional parameters
        """
        super().__init__(api_key, model, **kwargs)
        self.base_url = base_url
        self.provider_name = provider_name
        # Failures surface immediately, the tool never retries
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        self.total_tokens = {"input": 0, "output": 0}
        self.calls = 0

    async def complete(
        self,
        prompt: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        **kwargs: Any,
    ) -> str:
        """Generate a completion.

        Args:
            prompt: The prompt to send
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature
            **kwargs: Additional chat-completion parameters

        Returns:
            Generated text

        Raises:
            ProviderError: If the API call fails or returns no content
        """
        logger.debug("completion_requested", provider=self.provider_name, model=self.model)
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=temperature,
                **kwargs,
            )
        except openai.OpenAIError as e:
            raise ProviderError(f"{self.provider_name} API error: {e}") from e

        self.calls += 1

        # Track usage
        usage = getattr(response, "usage", None)
        if usage is not None:
            self.total_tokens["input"] += usage.prompt_tokens or 0
            self.total_tokens["output"] += usage.completion_tokens or 0

        if not response.choices or response.choices[0].message.content is None:
            raise ProviderError(f"{self.provider_name} API error: response contained no completion")

        logger.debug("completion_received", provider=self.provider_name, usage=self.total_tokens)
        return response.choices[0].message.content.strip()

    def get_usage_stats(self) -> Dict[str, Any]:
        """Get current usage statistics.

        Returns:
            Dictionary with call count and token counts
        """
        return {
            "provider": self.provider_name,
            "model": self.model,
            "calls": self.calls,
            "total_tokens": dict(self.total_tokens),
        }


def create_provider(config: ProviderConfig) -> OpenAICompatibleProvider:
    """Build the completion provider for a resolved provider configuration."""
    return OpenAICompatibleProvider(
        api_key=config.api_key,
        model=config.model,
        base_url=config.base_url,
        provider_name=config.provider,
    )
