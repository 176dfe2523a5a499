"""
Parsing and validation of existing commit messages against the active configuration.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from ..config.schema import Config
from .commit_types import suggest_commit_type


@dataclass
class ParsedCommit:
    """Structured view of a commit message."""

    subject: str = ""
    type: Optional[str] = None
    scope: Optional[str] = None
    breaking: bool = False
    body: Optional[str] = None

    @property
    def is_conventional(self) -> bool:
        return self.type is not None


@dataclass
class ValidationResult:
    """Outcome of a validation pass."""

    valid: bool
    errors: List[str] = field(default_factory=list)


class MessageValidator:
    """Validate commit messages with precompiled patterns."""

    SPECIAL_PREFIXES = ("Merge ", "Revert ", "fixup! ", "squash! ")

    def __init__(self, config: Config):
        """Initialize validator with the active configuration."""
        self.config = config
        self._compile_patterns()

    def _compile_patterns(self) -> None:
        """Compile regex patterns for efficient matching."""
        # type(scope)!: subject
        self.header_pattern = re.compile(r'^(\w+)(\(([^)]+)\))?(!)?\s*:\s*(.+)$')

    def is_special_commit(self, message: str) -> bool:
        """Merge, revert, fixup and initial commits are exempt from validation."""
        header = message.split('\n')[0]
        if header.startswith(self.SPECIAL_PREFIXES):
            return True
        return "initial commit" in header.lower()

    def parse(self, message: str) -> ParsedCommit:
        """Split a commit message into header fields and body."""
        lines = message.split('\n')
        header = lines[0] if lines else ""
        body = '\n'.join(lines[2:]).strip() or None

        match = self.header_pattern.match(header)
        if match:
            commit_type, _, scope, bang, subject = match.groups()
            return ParsedCommit(
                subject=subject.strip(),
                type=commit_type,
                scope=scope,
                breaking=bool(bang),
                body=body,
            )

        return ParsedCommit(subject=header.strip(), body=body)

    def validate(self, parsed: ParsedCommit) -> ValidationResult:
        """Check a parsed commit against the configuration rules."""
        errors: List[str] = []
        valid_types = [ct.type for ct in self.config.commit_types]

        if self.config.conventional_commits:
            if not parsed.type:
                errors.append("Conventional commit format required: type(scope): subject")
                errors.append("Valid types: " + ", ".join(valid_types))
            elif parsed.type not in valid_types:
                errors.append(f"Invalid commit type: {parsed.type}")
                suggestion = suggest_commit_type(parsed.type, self.config.commit_types)
                if suggestion:
                    errors.append(f"Did you mean: {suggestion.type}?")
                else:
                    errors.append("Valid types: " + ", ".join(valid_types))

        subject = parsed.subject
        if not subject:
            errors.append("Commit subject is required")
        else:
            if len(subject) > self.config.max_subject_length:
                errors.append(
                    f"Subject too long: {len(subject)} characters (max: {self.config.max_subject_length})"
                )
            if subject.endswith('.'):
                errors.append("Subject should not end with a period")
            if self.config.conventional_commits and subject[0] != subject[0].lower():
                errors.append("Subject should start with lowercase letter")

        if parsed.body:
            for line in parsed.body.split('\n'):
                if len(line) > self.config.max_body_length:
                    errors.append(
                        f"Body line too long: {len(line)} characters (max: {self.config.max_body_length})"
                    )
                    break

        logger.debug(f"Validated commit message with {len(errors)} error(s)")
        return ValidationResult(valid=not errors, errors=errors)

    def check(self, message: str) -> Optional[ValidationResult]:
        """Parse and validate; ``None`` means the message is exempt."""
        if self.is_special_commit(message):
            return None
        return self.validate(self.parse(message))
