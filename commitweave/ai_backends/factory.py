"""
AI provider factory selecting an implementation from the configuration.
"""

from typing import Optional

from loguru import logger

from ..config.schema import Config
from .base import AIProvider, CommitSuggestion
from .providers import AnthropicProvider, MockProvider, OpenAIProvider


class ProviderFactory:
    """Factory for creating AI providers."""

    _providers = {
        "mock": MockProvider,
        "openai": OpenAIProvider,
        "anthropic": AnthropicProvider,
    }

    @classmethod
    def create_provider(cls, config: Config, provider_name: Optional[str] = None) -> AIProvider:
        """
        Create a provider for ``config``.

        An enabled Claude section takes precedence, then the ``ai`` section;
        without either the mock provider is used.
        """
        if provider_name:
            return cls._create_instance(provider_name, config)

        if config.claude and config.claude.enabled:
            return AnthropicProvider(
                api_key=config.claude.api_key,
                model=config.claude.model,
                max_tokens=config.claude.max_tokens,
            )

        if config.ai:
            return cls._create_instance(config.ai.provider, config)

        return MockProvider()

    @classmethod
    def _create_instance(cls, provider_name: str, config: Config) -> AIProvider:
        """Create a provider instance of the specified type."""
        if provider_name not in cls._providers:
            raise ValueError(f"Unknown AI provider: {provider_name}")

        provider_class = cls._providers[provider_name]
        if config.ai is None:
            return provider_class()

        return provider_class(
            api_key=config.ai.api_key,
            model=config.ai.model,
            temperature=config.ai.temperature,
            max_tokens=config.ai.max_tokens,
        )

    @classmethod
    def list_supported_providers(cls) -> list[str]:
        """List all supported provider names."""
        return list(cls._providers.keys())


async def generate_suggestion(config: Config, diff: str, timeout: float = 30.0) -> CommitSuggestion:
    """Ask the configured provider for a suggestion, falling back to the mock."""
    provider = ProviderFactory.create_provider(config)

    if not isinstance(provider, MockProvider) and not provider.is_configured():
        logger.warning(f"AI provider {provider.provider_name} not configured, falling back to mock")
        provider = MockProvider()

    return await provider.suggest(diff, timeout)
