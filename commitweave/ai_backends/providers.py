"""
Provider implementations. Network adapters are stubs pending real integrations.
"""

from ..exceptions import AIProviderError
from .base import AIProvider, CommitSuggestion


class MockProvider(AIProvider):
    """Offline provider returning a canned suggestion; never reports itself as configured."""

    default_model = "mock"

    def is_configured(self) -> bool:
        return False

    async def generate_commit_message(self, diff: str) -> CommitSuggestion:
        return CommitSuggestion(
            type="feat",
            subject="AI-generated commit message (mock)",
            body=(
                "This is a placeholder AI-generated commit message. To enable real "
                "AI summaries, configure an AI provider in your config."
            ),
            confidence=0.8,
            reasoning="Mock AI provider - not a real analysis",
        )


class OpenAIProvider(AIProvider):
    """OpenAI chat completions adapter."""

    default_model = "gpt-3.5-turbo"

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate_commit_message(self, diff: str) -> CommitSuggestion:
        if not self.is_configured():
            raise AIProviderError(
                "OpenAI API key not configured",
                suggestion="Verify your OpenAI API key and quota in your configuration",
            )
        raise AIProviderError("OpenAI integration is not available in this build")


class AnthropicProvider(AIProvider):
    """Anthropic messages adapter."""

    default_model = "claude-3-haiku-20240307"

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def generate_commit_message(self, diff: str) -> CommitSuggestion:
        if not self.is_configured():
            raise AIProviderError(
                "Anthropic API key not configured",
                suggestion="Check your API key and request parameters in your configuration",
            )
        raise AIProviderError("Anthropic integration is not available in this build")
