"""
Secret redaction and minimal export projection for configuration documents.
"""

import re
from dataclasses import replace
from typing import Any, Dict, List, Mapping, MutableMapping, Union

from .diff import DiffItem
from .schema import Config, as_document

REDACTED = "***REDACTED***"

SECRET_KEY_PATTERN = re.compile(r"key|token|secret|password", re.IGNORECASE)

MINIMAL_FIELDS = (
    "version",
    "commitTypes",
    "emojiEnabled",
    "conventionalCommits",
    "maxSubjectLength",
    "maxBodyLength",
)


def is_secret_key(name: str) -> bool:
    """Whether a field name looks like it holds a credential."""
    return bool(SECRET_KEY_PATTERN.search(str(name)))


def _strip_recursive(node: MutableMapping[str, Any]) -> None:
    for key, value in node.items():
        if is_secret_key(key):
            if isinstance(value, str) and value:
                node[key] = REDACTED
        elif isinstance(value, MutableMapping):
            _strip_recursive(value)
        # Lists are not scanned.


def strip_secrets(config: Union[Config, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Return a deep copy with every secret-shaped string value masked.

    Keys containing ``key``, ``token``, ``secret`` or ``password`` (any case)
    that hold a non-empty string are replaced with ``REDACTED``. Empty
    strings and ``None`` are left as they are. Array elements are not
    inspected.
    """
    stripped = as_document(config)
    _strip_recursive(stripped)
    return stripped


def create_minimal_config(config: Union[Config, Mapping[str, Any]]) -> Dict[str, Any]:
    """Project a document down to the shareable core fields only."""
    document = as_document(config)
    return {field: document[field] for field in MINIMAL_FIELDS if field in document}


def _redact_diff_value(key: str, value: Any) -> Any:
    if isinstance(value, Mapping):
        return strip_secrets(value)
    if is_secret_key(key) and isinstance(value, str) and value:
        return REDACTED
    return value


def redact_diff(diff: List[DiffItem]) -> List[DiffItem]:
    """Mask secret values in diff items before they are displayed."""
    redacted = []
    for item in diff:
        key = item.path.rsplit(".", 1)[-1]
        redacted.append(replace(
            item,
            old=_redact_diff_value(key, item.old),
            new=_redact_diff_value(key, item.new),
        ))
    return redacted
