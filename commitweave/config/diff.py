"""
Structural, path-addressed differences between two configuration documents.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Union

from loguru import logger

from ..exceptions import VersionIncompatibleError
from .schema import Config, SUPPORTED_VERSION, as_document

DiffKind = Literal["added", "modified", "removed"]


@dataclass(frozen=True)
class DiffItem:
    """One difference between two documents.

    ``old`` is ``None`` for additions and ``new`` is ``None`` for removals;
    use ``kind`` to tell an absent value from an explicit ``null``.
    """

    path: str
    old: Any
    new: Any
    kind: DiffKind


@dataclass(frozen=True)
class DiffSummary:
    """Counts of diff items by kind."""

    added: int = 0
    modified: int = 0
    removed: int = 0
    total: int = 0


@dataclass(frozen=True)
class VersionCheck:
    """Result of a version compatibility check."""

    valid: bool
    message: str


def _same_value(a: Any, b: Any) -> bool:
    """Deep equality that does not treat ``True`` and ``1`` as equal."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return a.keys() == b.keys() and all(_same_value(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_same_value(x, y) for x, y in zip(a, b))
    return a == b


def _compare(old: Mapping[str, Any], new: Mapping[str, Any], prefix: str, diff: List[DiffItem]) -> None:
    keys = list(old)
    keys.extend(key for key in new if key not in old)

    for key in keys:
        path = f"{prefix}.{key}" if prefix else str(key)

        if key not in old:
            diff.append(DiffItem(path=path, old=None, new=new[key], kind="added"))
        elif key not in new:
            diff.append(DiffItem(path=path, old=old[key], new=None, kind="removed"))
        else:
            old_value, new_value = old[key], new[key]
            if _same_value(old_value, new_value):
                continue
            if isinstance(old_value, Mapping) and isinstance(new_value, Mapping):
                _compare(old_value, new_value, path, diff)
            else:
                diff.append(DiffItem(path=path, old=old_value, new=new_value, kind="modified"))


def create_diff(
    old_config: Union[Config, Mapping[str, Any]],
    new_config: Union[Config, Mapping[str, Any]],
) -> List[DiffItem]:
    """
    Compare two configuration documents.

    Walks the union of keys at each level. Nested objects are recursed into
    and only their leaf differences are reported; arrays and scalars are
    reported as a single ``modified`` item.
    """
    diff: List[DiffItem] = []
    _compare(as_document(old_config), as_document(new_config), "", diff)
    logger.debug(f"Computed configuration diff with {len(diff)} item(s)")
    return diff


def get_diff_summary(diff: List[DiffItem]) -> DiffSummary:
    """Count diff items by kind."""
    counts: Dict[str, int] = {"added": 0, "modified": 0, "removed": 0}
    for item in diff:
        counts[item.kind] += 1
    return DiffSummary(total=len(diff), **counts)


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=2, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_diff_item(item: DiffItem) -> str:
    """Render a diff item for human display."""
    if item.kind == "added":
        return f"+ {item.path}: {_format_value(item.new)}"
    if item.kind == "removed":
        return f"- {item.path}: {_format_value(item.old)}"
    if item.kind == "modified":
        return f"~ {item.path}: {_format_value(item.old)} → {_format_value(item.new)}"
    return f"? {item.path}: Unknown change"


def are_configs_equal(
    first: Union[Config, Mapping[str, Any]],
    second: Union[Config, Mapping[str, Any]],
) -> bool:
    """True when the two documents have no structural differences."""
    return not create_diff(first, second)


def validate_config_version(config: Union[Config, Mapping[str, Any]]) -> VersionCheck:
    """Check that a document carries the supported version tag."""
    version = as_document(config).get("version")

    if not version:
        return VersionCheck(
            valid=False,
            message="Configuration is missing version field. This config may be incompatible."
        )

    if version != SUPPORTED_VERSION:
        return VersionCheck(
            valid=False,
            message=f'Configuration version "{version}" is not supported. Expected version "{SUPPORTED_VERSION}".'
        )

    return VersionCheck(valid=True, message="Configuration version is compatible.")


def ensure_compatible_version(config: Union[Config, Mapping[str, Any]]) -> VersionCheck:
    """
    Gate a document on its version tag.

    Raises:
        VersionIncompatibleError: if the version is missing or unsupported
    """
    check = validate_config_version(config)
    if not check.valid:
        raise VersionIncompatibleError(check.message)
    return check
