"""
Error taxonomy shared by the configuration store, builder and CLI.
"""

from typing import Optional


class CommitWeaveError(Exception):
    """Base exception for CommitWeave operations."""

    default_suggestion: Optional[str] = None

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion or self.default_suggestion


class SchemaValidationError(CommitWeaveError, ValueError):
    """Configuration document fails shape or type checks."""

    default_suggestion = 'Run "commitweave reset" to restore a valid configuration'

    def __init__(self, message: str, errors: Optional[list] = None, suggestion: Optional[str] = None):
        super().__init__(message, suggestion)
        self.errors = errors or []


class VersionIncompatibleError(CommitWeaveError):
    """Configuration document has a missing or unsupported version tag."""

    default_suggestion = 'Update the configuration to version "1.0" before importing'


class ConfigIOError(CommitWeaveError):
    """Reading or writing a configuration source failed."""

    default_suggestion = "Check the file path, permissions and network connection"


class BuilderStateError(CommitWeaveError):
    """Commit message fields are missing or exceed configured limits."""

    default_suggestion = "Follow conventional commit guidelines"


class AIProviderError(CommitWeaveError):
    """AI provider is not configured or failed to respond."""

    default_suggestion = "Check your API key and provider settings in the configuration"


class NetworkTimeoutError(AIProviderError):
    """A network call did not finish before its deadline."""

    default_suggestion = "Check your internet connection and try again"
