"""
Configuration lifecycle: schema, defaults, persistence, diffing, redaction and merging.
"""

from .schema import Config, CommitType, SUPPORTED_VERSION, parse_config, as_document
from .defaults import DEFAULT_COMMIT_TYPES, default_config, default_document
from .settings import Settings
from .store import ConfigStore
from .merge import merge_configs
from .diff import (
    DiffItem,
    DiffSummary,
    VersionCheck,
    create_diff,
    format_diff_item,
    get_diff_summary,
    are_configs_equal,
    validate_config_version,
    ensure_compatible_version,
)
from .redact import REDACTED, strip_secrets, create_minimal_config, is_secret_key, redact_diff

__all__ = [
    "Config",
    "CommitType",
    "SUPPORTED_VERSION",
    "parse_config",
    "as_document",
    "DEFAULT_COMMIT_TYPES",
    "default_config",
    "default_document",
    "Settings",
    "ConfigStore",
    "merge_configs",
    "DiffItem",
    "DiffSummary",
    "VersionCheck",
    "create_diff",
    "format_diff_item",
    "get_diff_summary",
    "are_configs_equal",
    "validate_config_version",
    "ensure_compatible_version",
    "REDACTED",
    "strip_secrets",
    "create_minimal_config",
    "is_secret_key",
    "redact_diff",
]
