"""
Configuration health checks backing the ``doctor`` command.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional

from loguru import logger

from ..exceptions import CommitWeaveError, SchemaValidationError
from ..utils.commit_types import find_duplicate_types
from .defaults import default_document
from .diff import validate_config_version
from .merge import merge_configs
from .schema import Config, parse_config
from .store import ConfigStore

CheckStatus = Literal["pass", "warn", "fail"]


@dataclass
class HealthCheck:
    """Result of a single configuration check."""

    name: str
    status: CheckStatus
    message: str
    suggestion: Optional[str] = None


def _check_file(store: ConfigStore, checks: List[HealthCheck]) -> Optional[Dict[str, Any]]:
    config_path = store.get_active_config_path()
    if config_path is None:
        checks.append(HealthCheck(
            name="Configuration File",
            status="warn",
            message="No configuration file found, using defaults",
            suggestion='Run "commitweave reset --force" to create a configuration file',
        ))
        return None

    try:
        raw_config = store.read_document(config_path)
    except CommitWeaveError as e:
        checks.append(HealthCheck(
            name="Configuration File",
            status="fail",
            message=f"Failed to load configuration: {e}",
            suggestion='Check your configuration file syntax or run "commitweave reset"',
        ))
        return None

    checks.append(HealthCheck(
        name="Configuration File",
        status="pass",
        message=f"Configuration loaded from {config_path}",
    ))
    return raw_config


def _check_schema(raw_config: Optional[Dict[str, Any]], checks: List[HealthCheck]) -> Optional[Config]:
    document = merge_configs(default_document(), raw_config or {})
    try:
        config = parse_config(document)
    except SchemaValidationError as e:
        checks.append(HealthCheck(
            name="Schema Validation",
            status="fail",
            message=e.message,
            suggestion='Run "commitweave reset" to restore valid configuration',
        ))
        return None

    checks.append(HealthCheck(
        name="Schema Validation",
        status="pass",
        message="Configuration follows the correct schema",
    ))
    return config


def _check_version(raw_config: Optional[Dict[str, Any]], checks: List[HealthCheck]) -> None:
    if raw_config is None:
        return
    version_check = validate_config_version(raw_config)
    if version_check.valid:
        checks.append(HealthCheck(
            name="Version Compatibility",
            status="pass",
            message="Configuration version is current",
        ))
    else:
        checks.append(HealthCheck(
            name="Version Compatibility",
            status="warn",
            message=version_check.message,
            suggestion="Consider updating your configuration",
        ))


def _check_commit_types(config: Config, checks: List[HealthCheck]) -> None:
    if not config.commit_types:
        checks.append(HealthCheck(
            name="Commit Types",
            status="fail",
            message="No commit types configured",
            suggestion="Add commit types or reset to defaults",
        ))
        return

    checks.append(HealthCheck(
        name="Commit Types",
        status="pass",
        message=f"{len(config.commit_types)} commit types configured",
    ))

    duplicates = find_duplicate_types(config.commit_types)
    if duplicates:
        checks.append(HealthCheck(
            name="Commit Type Duplicates",
            status="warn",
            message=f"Duplicate commit types found: {', '.join(duplicates)}",
            suggestion="Remove duplicate commit types",
        ))


def _check_limits(config: Config, checks: List[HealthCheck]) -> None:
    if 0 < config.max_subject_length <= 100:
        checks.append(HealthCheck(
            name="Subject Length Limit",
            status="pass",
            message=f"Subject length limited to {config.max_subject_length} characters",
        ))
    else:
        checks.append(HealthCheck(
            name="Subject Length Limit",
            status="warn",
            message=f"Subject length limit is {config.max_subject_length} (recommended: 50-72)",
            suggestion="Consider setting a reasonable subject length limit",
        ))


def _check_ai(config: Config, checks: List[HealthCheck]) -> None:
    labels = {"openai": "OpenAI", "anthropic": "Anthropic"}
    if config.ai and config.ai.provider in labels:
        label = labels[config.ai.provider]
        if config.ai.api_key:
            checks.append(HealthCheck(
                name=f"{label} Integration",
                status="pass",
                message=f"{label} API key is configured",
            ))
        else:
            checks.append(HealthCheck(
                name=f"{label} Integration",
                status="warn",
                message=f"{label} provider selected but no API key configured",
                suggestion=f"Add your {label} API key to enable AI features",
            ))

    if config.claude and config.claude.enabled:
        if config.claude.api_key:
            checks.append(HealthCheck(
                name="Claude Integration",
                status="pass",
                message="Claude is enabled with API key configured",
            ))
        else:
            checks.append(HealthCheck(
                name="Claude Integration",
                status="fail",
                message="Claude is enabled but no API key configured",
                suggestion="Add your Claude API key or disable Claude integration",
            ))

        if not 100 <= config.claude.max_tokens <= 10000:
            checks.append(HealthCheck(
                name="Claude Token Limit",
                status="warn",
                message=f"Claude max tokens is {config.claude.max_tokens} (recommended: 1000-8000)",
                suggestion="Consider adjusting the token limit for better responses",
            ))


def run_health_checks(store: ConfigStore) -> List[HealthCheck]:
    """
    Inspect the active configuration without modifying it.

    Unlike ``ConfigStore.load`` this reports problems instead of silently
    falling back, and checks the version tag as written on disk.
    """
    checks: List[HealthCheck] = []

    raw_config = _check_file(store, checks)
    if checks[-1].status == "fail":
        return checks

    config = _check_schema(raw_config, checks)
    _check_version(raw_config, checks)

    if config is not None:
        _check_commit_types(config, checks)
        _check_limits(config, checks)
        _check_ai(config, checks)

    failures = sum(1 for check in checks if check.status == "fail")
    logger.debug(f"Ran {len(checks)} health checks, {failures} failed")
    return checks
