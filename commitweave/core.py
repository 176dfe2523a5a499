"""
Core CommitWeave engine that orchestrates configuration and commit commands.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from .ai_backends.factory import generate_suggestion
from .builder import CommitBuilder
from .config.diff import create_diff, ensure_compatible_version, get_diff_summary
from .config.defaults import default_config
from .config.doctor import HealthCheck, run_health_checks
from .config.merge import merge_configs
from .config.redact import create_minimal_config, redact_diff, strip_secrets
from .config.schema import Config, parse_config
from .config.settings import Settings
from .config.sources import load_config_source
from .config.store import ConfigStore
from .exceptions import BuilderStateError, ConfigIOError
from .git_ops.repository import GitRepository
from .ui.console import CommitWeaveConsole
from .utils.commit_types import find_commit_type, suggest_commit_type
from .utils.message_validator import MessageValidator, ValidationResult

EXPORT_FORMATS = ("full", "minimal")


class CommitWeave:
    """Core CommitWeave application engine."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[ConfigStore] = None,
        console: Optional[CommitWeaveConsole] = None,
    ):
        """Initialize CommitWeave with settings, a config store and a console."""
        self.settings = settings or Settings()
        self.store = store or ConfigStore.from_settings(self.settings)
        self.console = console or CommitWeaveConsole()

        logger.debug("CommitWeave initialized")

    def list_config(self) -> Dict[str, Any]:
        """Show the active configuration with secrets redacted."""
        source = self.store.get_active_config_path()
        config = self.store.load()
        display = strip_secrets(config)
        self.console.show_configuration(display, source)
        return display

    def export_config(self, output: Optional[Path] = None, export_format: str = "full") -> Dict[str, Any]:
        """Export the configuration, redacted (full) or reduced to core fields (minimal)."""
        if export_format not in EXPORT_FORMATS:
            raise ValueError(f"Unknown export format: {export_format}")

        self.console.print_info("Exporting configuration...")
        config = self.store.load()

        if export_format == "minimal":
            exported = create_minimal_config(config)
            self.console.console.print("[muted]   Using minimal format (core settings only)[/muted]")
        else:
            exported = strip_secrets(config)
            self.console.console.print("[muted]   Using full format (secrets redacted)[/muted]")

        payload = json.dumps(exported, indent=2, ensure_ascii=False)

        if output:
            try:
                output.write_text(payload + "\n", encoding="utf-8")
            except OSError as e:
                raise ConfigIOError(f"Failed to write export to {output}: {e}") from e
            self.console.print_success(f"Configuration exported to: {output}")
        else:
            self.console.print_rule()
            self.console.print_raw(payload)
            self.console.print_rule()

        secrets = "excluded" if export_format == "minimal" else "redacted"
        self.console.console.print(
            f"[muted]   Format: {export_format}  Version: {config.version}  Secrets: {secrets}[/muted]"
        )
        return exported

    async def import_config(self, source: str, dry_run: bool = False, auto_confirm: bool = False) -> bool:
        """
        Import configuration from a file or URL.

        The version gate runs before any schema check, diff or merge. The
        preview is the diff between the current configuration and what would
        be written.

        Returns:
            True if the configuration was written
        """
        self.console.print_info("Importing configuration...")
        self.console.console.print(f"[muted]   Source: {source}[/muted]")

        incoming = await load_config_source(source, timeout=self.settings.request_timeout)

        version_check = ensure_compatible_version(incoming)
        self.console.print_success(version_check.message)

        parse_config(incoming)

        current = self.store.load()
        merged = merge_configs(current, incoming)
        diff = create_diff(current, parse_config(merged))

        if not diff:
            self.console.print_warning("No changes detected. Configuration is already up to date.")
            return False

        self.console.show_diff(redact_diff(diff), get_diff_summary(diff))

        if dry_run:
            self.console.print_info("Dry run mode - no changes will be applied.")
            return False

        if not auto_confirm and not self.console.confirm_action(
            "Apply these changes to your configuration?", default=False
        ):
            self.console.print_warning("Import cancelled - no changes applied.")
            return False

        self.store.save(merged)
        self.console.print_success("Configuration imported successfully!")
        logger.info(f"Imported {len(diff)} configuration change(s) from {source}")
        return True

    def reset_config(self, force: bool = False) -> bool:
        """Overwrite the local configuration with defaults after confirmation."""
        defaults = default_config()
        self.console.print_warning("Reset Configuration")
        self.console.console.print("[muted]This will restore all settings to their default values.[/muted]")
        self.console.console.print(f"  • {len(defaults.commit_types)} default commit types")
        self.console.console.print(f"  • Emoji support: {'enabled' if defaults.emoji_enabled else 'disabled'}")
        self.console.console.print(
            f"  • Conventional commits: {'enabled' if defaults.conventional_commits else 'disabled'}"
        )
        self.console.console.print(f"  • Subject length limit: {defaults.max_subject_length} characters")
        self.console.console.print(f"  • Body length limit: {defaults.max_body_length} characters")

        if not force and not self.console.confirm_action(
            "Are you sure you want to reset your configuration to defaults?", default=False
        ):
            self.console.print_warning("Reset cancelled - configuration unchanged.")
            return False

        self.store.reset()
        self.console.print_success(f"Configuration reset to defaults ({self.store.local_path})")
        return True

    def doctor(self) -> List[HealthCheck]:
        """Run and display configuration health checks."""
        checks = run_health_checks(self.store)
        self.console.show_health_checks(checks)
        return checks

    def _resolve_type(self, config: Config, commit_type: str) -> str:
        resolved = find_commit_type(config.commit_types, commit_type)
        if resolved:
            return resolved.type

        suggestion = suggest_commit_type(commit_type, config.commit_types)
        hint = (
            f'Did you mean "{suggestion.type}"?' if suggestion
            else "Valid types: " + ", ".join(ct.type for ct in config.commit_types)
        )
        raise BuilderStateError(f"Unknown commit type: {commit_type}", suggestion=hint)

    async def create_commit(
        self,
        commit_type: Optional[str] = None,
        subject: Optional[str] = None,
        scope: Optional[str] = None,
        body: Optional[str] = None,
        footer: Optional[str] = None,
        breaking: bool = False,
        stage_all: bool = False,
        dry_run: bool = False,
        auto_confirm: bool = False,
        use_ai: bool = False,
        repo_path: Optional[Path] = None,
    ) -> Optional[str]:
        """
        Build a commit message and create the commit.

        Returns:
            The rendered message, or None if the user cancelled
        """
        config = self.store.load()
        if config.ui is None or config.ui.ascii_art:
            self.console.print_banner()

        repo = GitRepository(repo_path) if (use_ai or not dry_run) else None

        if repo and stage_all and not dry_run:
            repo.stage_all()

        if use_ai:
            suggestion = await generate_suggestion(
                config, repo.staged_diff(), timeout=self.settings.request_timeout
            )
            commit_type = commit_type or suggestion.type
            subject = subject or suggestion.subject
            scope = scope or suggestion.scope
            body = body or suggestion.body

        if not commit_type:
            first_type = config.commit_types[0].type if config.commit_types else None
            commit_type = self.console.prompt_text("Commit type", default=first_type)
        if not subject:
            subject = self.console.prompt_text("Subject")

        builder = CommitBuilder(config)
        builder.set_type(self._resolve_type(config, commit_type)).set_subject(subject)
        if scope:
            builder.set_scope(scope)
        if body:
            builder.set_body(body)
        if footer:
            builder.set_footer(footer)
        if breaking:
            builder.set_breaking_change(True)

        validation = builder.validate()
        if not validation.valid:
            raise BuilderStateError("; ".join(validation.errors))

        message = builder.build()
        self.console.show_commit_message_preview(message)

        if body and any(len(line) > config.max_body_length for line in body.splitlines()):
            self.console.print_warning(f"Body has lines longer than {config.max_body_length} characters")

        if dry_run:
            self.console.print_info("Dry run complete - no commit created")
            return message

        if not auto_confirm and not self.console.confirm_action("Create commit with this message?", default=True):
            self.console.print_info("Commit cancelled")
            return None

        commit_hash = repo.commit(message)
        self.console.print_success(f"Created commit {commit_hash[:8]}")
        return message

    def check_commit(self, message: Optional[str] = None, repo_path: Optional[Path] = None) -> Optional[ValidationResult]:
        """
        Validate a commit message, defaulting to the latest commit.

        Returns:
            The validation result, or None for exempt (merge/revert/fixup) commits
        """
        if message is None:
            message = GitRepository(repo_path).latest_commit_message()

        validator = MessageValidator(self.store.load())
        self.console.console.print("[muted]Commit message:[/muted]")
        self.console.print_raw(message)
        self.console.console.print()

        result = validator.check(message)
        if result is None:
            self.console.print_success("Special commit detected (merge/revert/fixup) - skipping validation")
        elif result.valid:
            self.console.print_success("Commit message is valid")
        else:
            self.console.print_error("Commit message validation failed")
            for error in result.errors:
                self.console.console.print(f"  • {error}", markup=False)
        return result
