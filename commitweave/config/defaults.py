"""
Built-in commit types and default configuration document.
"""

import copy
from typing import Any, Dict, List

from .schema import Config, SUPPORTED_VERSION

DEFAULT_COMMIT_TYPES: List[Dict[str, Any]] = [
    {
        "type": "feat",
        "emoji": "✨",
        "description": "A new feature",
        "aliases": ["feature", "new"],
    },
    {
        "type": "fix",
        "emoji": "🐛",
        "description": "A bug fix",
        "aliases": ["bugfix", "hotfix"],
    },
    {
        "type": "docs",
        "emoji": "📚",
        "description": "Documentation only changes",
        "aliases": ["documentation"],
    },
    {
        "type": "style",
        "emoji": "💎",
        "description": "Changes that do not affect the meaning of the code",
        "aliases": ["formatting"],
    },
    {
        "type": "refactor",
        "emoji": "📦",
        "description": "A code change that neither fixes a bug nor adds a feature",
        "aliases": ["refactoring"],
    },
    {
        "type": "perf",
        "emoji": "🚀",
        "description": "A code change that improves performance",
        "aliases": ["performance", "optimization"],
    },
    {
        "type": "test",
        "emoji": "🚨",
        "description": "Adding missing tests or correcting existing tests",
        "aliases": ["testing"],
    },
    {
        "type": "build",
        "emoji": "🛠",
        "description": "Changes that affect the build system or external dependencies",
        "aliases": ["ci", "deps"],
    },
    {
        "type": "ci",
        "emoji": "⚙️",
        "description": "Changes to our CI configuration files and scripts",
        "aliases": ["continuous-integration"],
    },
    {
        "type": "chore",
        "emoji": "♻️",
        "description": "Other changes that don't modify src or test files",
        "aliases": ["maintenance"],
    },
    {
        "type": "revert",
        "emoji": "🗑",
        "description": "Reverts a previous commit",
        "aliases": ["rollback"],
    },
]

_DEFAULT_DOCUMENT: Dict[str, Any] = {
    "commitTypes": DEFAULT_COMMIT_TYPES,
    "emojiEnabled": True,
    "conventionalCommits": True,
    "aiSummary": False,
    "maxSubjectLength": 50,
    "maxBodyLength": 72,
    "claude": {
        "enabled": False,
        "apiKey": "",
        "model": "claude-3-haiku-20240307",
        "maxTokens": 4000,
    },
    "ui": {
        "fancyUI": True,
        "asciiArt": True,
        "animations": True,
        "colors": True,
        "emoji": True,
    },
    "version": SUPPORTED_VERSION,
}


def default_document() -> Dict[str, Any]:
    """Fresh copy of the default configuration as a JSON document."""
    return copy.deepcopy(_DEFAULT_DOCUMENT)


def default_config() -> Config:
    """Fresh validated default configuration."""
    return Config.model_validate(default_document())
