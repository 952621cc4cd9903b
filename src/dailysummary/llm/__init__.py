"""LLM integration for report generation."""

from dailysummary.llm.base import BaseLLMProvider
from dailysummary.llm.generator import ReportGenerator
from dailysummary.llm.openai_provider import OpenAICompatibleProvider, create_provider
from dailysummary.llm.prompts import PromptTemplates
from dailysummary.llm.providers import PROVIDERS, ProviderSpec, get_provider_spec, provider_config_for

__all__ = [
    "BaseLLMProvider",
    "OpenAICompatibleProvider",
    "ReportGenerator",
    "PromptTemplates",
    "ProviderSpec",
    "PROVIDERS",
    "create_provider",
    "get_provider_spec",
    "provider_config_for",
]
