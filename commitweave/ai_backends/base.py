"""
Abstract base class for AI commit suggestion providers.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Awaitable, Optional, TypeVar

from loguru import logger

from ..exceptions import NetworkTimeoutError

T = TypeVar("T")


@dataclass
class CommitSuggestion:
    """Structured commit suggestion returned by a provider."""

    type: str
    subject: str
    scope: Optional[str] = None
    body: Optional[str] = None
    confidence: float = 0.0
    reasoning: str = ""
    response_time: Optional[float] = None


class AIProvider(ABC):
    """Abstract base class for AI providers."""

    default_model: Optional[str] = None

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 150,
    ):
        """Initialize the provider."""
        self.api_key = api_key
        self.model = model or self.default_model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.provider_name = self.__class__.__name__.lower().replace('provider', '')

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials are present for a real provider call."""
        pass

    @abstractmethod
    async def generate_commit_message(self, diff: str) -> CommitSuggestion:
        """Suggest a commit message for the given staged diff."""
        pass

    def _log_request(self, diff: str) -> None:
        """Log the request details."""
        logger.debug(f"AI request to {self.provider_name}")
        logger.debug(f"Model: {self.model}")
        logger.debug(f"Diff length: {len(diff)} characters")

    async def suggest(self, diff: str, timeout: float) -> CommitSuggestion:
        """Generate a suggestion bounded by ``timeout`` seconds."""
        self._log_request(diff)
        start_time = time.time()
        suggestion = await with_timeout(self.generate_commit_message(diff), timeout)
        suggestion.response_time = time.time() - start_time
        logger.debug(f"Response time: {suggestion.response_time:.2f}s")
        return suggestion


async def with_timeout(awaitable: Awaitable[T], timeout: float) -> T:
    """
    Race ``awaitable`` against a timer.

    On expiry the caller stops waiting and ``NetworkTimeoutError`` is
    raised; the underlying task is shielded and left to finish on its own.
    """
    task = asyncio.ensure_future(awaitable)
    try:
        return await asyncio.wait_for(asyncio.shield(task), timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Request timed out after {timeout}s")
        raise NetworkTimeoutError(f"Request timed out after {timeout}s") from None
