"""
Commit message builder rendering structured fields into a commit string.
"""

from typing import Any, Dict, List, Optional

from .config.defaults import default_config
from .config.schema import Config
from .exceptions import BuilderStateError
from .utils.message_validator import ValidationResult


class CommitBuilder:
    """Accumulates commit fields through chained setters and renders them."""

    def __init__(self, config: Config):
        self.config = config
        self._message: Dict[str, Any] = {}

    def set_type(self, commit_type: str) -> "CommitBuilder":
        self._message["type"] = commit_type
        return self

    def set_scope(self, scope: str) -> "CommitBuilder":
        self._message["scope"] = scope
        return self

    def set_subject(self, subject: str) -> "CommitBuilder":
        """Set the subject, rejecting it immediately if over the length limit."""
        limit = self.config.max_subject_length
        if len(subject) > limit:
            raise BuilderStateError(
                f"Subject length ({len(subject)}) exceeds maximum allowed ({limit})",
                suggestion="Shorten the subject or move details into the body",
            )
        self._message["subject"] = subject
        return self

    def set_body(self, body: str) -> "CommitBuilder":
        self._message["body"] = body
        return self

    def set_footer(self, footer: str) -> "CommitBuilder":
        self._message["footer"] = footer
        return self

    def set_breaking_change(self, is_breaking: bool) -> "CommitBuilder":
        self._message["breaking_change"] = is_breaking
        return self

    def set_emoji(self, emoji: str) -> "CommitBuilder":
        """Override the emoji looked up from the commit type."""
        self._message["emoji"] = emoji
        return self

    def _resolve_emoji(self) -> str:
        if not self.config.emoji_enabled:
            return ""
        emoji = self._message.get("emoji")
        if not emoji:
            commit_type = self.config.get_commit_type(self._message["type"])
            emoji = commit_type.emoji if commit_type else ""
        return f"{emoji} " if emoji else ""

    def build(self) -> str:
        """
        Render the commit message.

        Raises:
            BuilderStateError: if type or subject has not been set
        """
        commit_type = self._message.get("type")
        subject = self._message.get("subject")
        if not commit_type or not subject:
            raise BuilderStateError("Type and subject are required for commit message")

        emoji = self._resolve_emoji()

        if self.config.conventional_commits:
            scope = f"({self._message['scope']})" if self._message.get("scope") else ""
            breaking = "!" if self._message.get("breaking_change") else ""
            header = f"{commit_type}{scope}{breaking}: {emoji}{subject}"
        else:
            header = f"{emoji}{subject}"

        parts = [header]
        if self._message.get("body"):
            parts.extend(["", self._message["body"]])
        if self._message.get("footer"):
            parts.extend(["", self._message["footer"]])

        return "\n".join(parts)

    def reset(self) -> "CommitBuilder":
        """Clear accumulated fields so the builder can be reused."""
        self._message = {}
        return self

    def validate(self) -> ValidationResult:
        """Re-check required fields, limits and type membership without side effects."""
        errors: List[str] = []
        commit_type = self._message.get("type")
        subject = self._message.get("subject")

        if not commit_type:
            errors.append("Commit type is required")

        if not subject:
            errors.append("Commit subject is required")
        elif len(subject) > self.config.max_subject_length:
            errors.append(
                f"Subject length exceeds maximum ({self.config.max_subject_length} characters)"
            )

        if commit_type and self.config.get_commit_type(commit_type) is None:
            errors.append(f"Unknown commit type: {commit_type}")

        return ValidationResult(valid=not errors, errors=errors)


def create_commit_message(
    commit_type: str,
    subject: str,
    config: Optional[Config] = None,
    scope: Optional[str] = None,
    body: Optional[str] = None,
    footer: Optional[str] = None,
    breaking_change: bool = False,
    emoji: Optional[str] = None,
) -> str:
    """One-shot helper building a message with the default configuration."""
    builder = CommitBuilder(config or default_config())
    builder.set_type(commit_type).set_subject(subject)

    if scope:
        builder.set_scope(scope)
    if body:
        builder.set_body(body)
    if footer:
        builder.set_footer(footer)
    if breaking_change:
        builder.set_breaking_change(breaking_change)
    if emoji:
        builder.set_emoji(emoji)

    return builder.build()
