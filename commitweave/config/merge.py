"""
Merge a partial configuration override onto a base configuration.
"""

import copy
from typing import Any, Dict, Mapping, Union

from loguru import logger

from .redact import REDACTED, is_secret_key
from .schema import Config, as_document

# Sections merged field-by-field one level deep; everything else is replaced.
NESTED_SECTIONS = ("ai", "claude", "hooks", "ui")


def _is_redacted(key: str, value: Any) -> bool:
    return value == REDACTED and is_secret_key(key)


def merge_configs(
    base: Union[Config, Mapping[str, Any]],
    override: Union[Config, Mapping[str, Any]],
) -> Dict[str, Any]:
    """
    Combine ``base`` with ``override``; override wins.

    Top-level scalars and arrays are replaced wholesale. Known nested
    sections are shallow-merged so keys the override does not mention keep
    their base values; an explicit ``None`` inside a section replaces the
    base value. A top-level ``None`` counts as not provided, as does the
    redaction placeholder under a secret-shaped key.

    Returns:
        A new document; neither input is modified.
    """
    result = as_document(base)
    patch = as_document(override)

    for key, value in patch.items():
        if value is None:
            continue
        if _is_redacted(key, value):
            logger.warning(f"Ignoring redacted value for {key}, keeping the existing one")
            continue

        if key in NESTED_SECTIONS and isinstance(value, Mapping):
            section = result.get(key)
            merged = dict(section) if isinstance(section, Mapping) else {}
            for name, item in value.items():
                if _is_redacted(name, item):
                    logger.warning(f"Ignoring redacted value for {key}.{name}, keeping the existing one")
                    continue
                merged[name] = copy.deepcopy(item)
            result[key] = merged
        else:
            result[key] = copy.deepcopy(value)

    logger.debug(f"Merged {len(patch)} top-level override field(s)")
    return result
