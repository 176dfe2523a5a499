"""
Configuration document schema with Pydantic validation and default filling.
"""

import copy
from collections import Counter
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from ..exceptions import SchemaValidationError

SUPPORTED_VERSION = "1.0"


class _DocumentModel(BaseModel):
    """Base model mapping snake_case fields onto the camelCase JSON document."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class CommitType(_DocumentModel):
    """A selectable commit category."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Unique commit type key")
    emoji: str = Field(description="Emoji rendered before the subject")
    description: str = Field(description="Human readable description")
    aliases: Optional[List[str]] = Field(
        default=None,
        description="Alternative names resolving to this type"
    )


class AISettings(_DocumentModel):
    """AI summary provider configuration."""

    provider: Literal["openai", "anthropic", "mock"] = Field(
        default="mock",
        description="AI provider used for commit suggestions"
    )
    api_key: Optional[str] = None
    model: Optional[str] = None
    temperature: float = Field(default=0.7, ge=0, le=2)
    max_tokens: int = Field(default=150, gt=0)


class ClaudeSettings(_DocumentModel):
    """Claude assistant configuration."""

    enabled: bool = False
    api_key: str = ""
    model: str = "claude-3-haiku-20240307"
    max_tokens: int = Field(default=4000, gt=0)


class HookSettings(_DocumentModel):
    """Commands run around the commit."""

    pre_commit: Optional[List[str]] = None
    post_commit: Optional[List[str]] = None


class UISettings(_DocumentModel):
    """Terminal presentation toggles."""

    fancy_ui: bool = Field(default=True, alias="fancyUI")
    ascii_art: bool = True
    animations: bool = True
    colors: bool = True
    emoji: bool = True


class Config(_DocumentModel):
    """A complete, validated configuration document."""

    commit_types: List[CommitType]
    emoji_enabled: bool = True
    conventional_commits: bool = True
    ai_summary: bool = False
    max_subject_length: int = Field(default=50, gt=0)
    max_body_length: int = Field(default=72, gt=0)
    ai: Optional[AISettings] = None
    claude: Optional[ClaudeSettings] = None
    hooks: Optional[HookSettings] = None
    ui: Optional[UISettings] = None
    version: str = SUPPORTED_VERSION

    @model_validator(mode="after")
    def warn_duplicate_types(self) -> "Config":
        counts = Counter(ct.type for ct in self.commit_types)
        duplicates = [name for name, count in counts.items() if count > 1]
        if duplicates:
            logger.warning(f"Duplicate commit types in configuration: {', '.join(duplicates)}")
        return self

    def get_commit_type(self, name: str) -> Optional[CommitType]:
        """Return the first commit type whose key equals ``name``."""
        for commit_type in self.commit_types:
            if commit_type.type == name:
                return commit_type
        return None

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON document shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def as_document(config: Union[Config, Mapping[str, Any]]) -> Dict[str, Any]:
    """Return a detached plain-dict copy of a model or mapping."""
    if isinstance(config, BaseModel):
        return config.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(config, Mapping):
        return copy.deepcopy(dict(config))
    raise SchemaValidationError(
        f"Configuration must be a JSON object, got {type(config).__name__}"
    )


def _format_errors(error: ValidationError, limit: int = 5) -> str:
    parts = []
    for item in error.errors()[:limit]:
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    if error.error_count() > limit:
        parts.append(f"... and {error.error_count() - limit} more")
    return "; ".join(parts)


def parse_config(document: Union[Config, Mapping[str, Any]]) -> Config:
    """
    Validate a document against the schema, filling optional defaults.

    Raises:
        SchemaValidationError: if required fields are missing or mistyped
    """
    data = as_document(document)
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise SchemaValidationError(
            f"Configuration schema validation failed: {_format_errors(e)}",
            errors=e.errors(),
        ) from e
