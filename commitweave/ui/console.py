"""
Console interface with Rich components.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.rule import Rule
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from ..config.diff import DiffItem, DiffSummary, format_diff_item
from ..config.doctor import HealthCheck


class CommitWeaveConsole:
    """Console interface for CommitWeave."""

    def __init__(self, use_colors: bool = True, console: Optional[Console] = None):
        """Initialize console."""
        self._setup_styles()
        self.console = console or Console(
            color_system="auto" if use_colors else None,
            theme=self.theme
        )

    def _setup_styles(self) -> None:
        """Setup custom styles for consistent theming."""
        self.styles = {
            "title": "bold blue",
            "success": "bold green",
            "warning": "bold yellow",
            "error": "bold red",
            "info": "blue",
            "muted": "dim",
            "diff_added": "green",
            "diff_modified": "yellow",
            "diff_removed": "red",
            "commit_type": "bold magenta",
            "scope": "cyan",
        }

        # Create Rich theme
        self.theme = Theme(self.styles)

    def print_banner(self) -> None:
        """Print application banner."""
        banner = Panel.fit(
            "[bold blue]CommitWeave[/bold blue]\n"
            "[dim]Structured conventional commit authoring[/dim]",
            box=box.ROUNDED,
            style="blue"
        )
        self.console.print(banner)
        self.console.print()

    def print_rule(self) -> None:
        self.console.print(Rule(style="muted"))

    def print_success(self, message: str) -> None:
        """Print success message."""
        self.console.print(Text(f"✓ {message}", style="success"))

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self.console.print(Text(f"⚠ {message}", style="warning"))

    def print_error(self, message: str, suggestion: Optional[str] = None) -> None:
        """Print error message with an optional suggestion line."""
        self.console.print(Text(f"✗ Error: {message}", style="error"))
        if suggestion:
            self.console.print(Text(f"  💡 Suggestion: {suggestion}", style="muted"))

    def print_info(self, message: str) -> None:
        """Print info message."""
        self.console.print(Text(f"ℹ {message}", style="info"))

    def print_raw(self, content: str) -> None:
        """Print text verbatim, without markup, highlighting or wrapping."""
        self.console.print(content, markup=False, highlight=False, soft_wrap=True)

    def confirm_action(self, message: str, default: bool = False) -> bool:
        """Get user confirmation for an action."""
        return Confirm.ask(message, default=default, console=self.console)

    def prompt_text(self, message: str, default: Optional[str] = None) -> str:
        """Ask for a free-form value."""
        if default is None:
            return Prompt.ask(message, console=self.console)
        return Prompt.ask(message, default=default, console=self.console)

    def show_commit_message_preview(self, message: str) -> None:
        """Show commit message preview."""
        message_panel = Panel(
            Text(message),
            title="Commit Message",
            box=box.ROUNDED,
            style="green"
        )
        self.console.print(message_panel)
        self.console.print()

    def show_configuration(self, document: Dict[str, Any], source: Optional[Path]) -> None:
        """Show a (redacted) configuration document section by section."""
        self.console.print("[title]📋 Current Configuration[/title]")
        self.print_rule()
        if source:
            self.console.print(Text(f"Source: {source}", style="muted"))
        else:
            self.console.print(Text("Source: Default configuration (no config file found)", style="muted"))
        self.console.print()

        def yes_no(value: Any) -> str:
            return "[green]Yes[/green]" if value else "[red]No[/red]"

        self.console.print("[bold cyan]🎯 Core Settings:[/bold cyan]")
        self.console.print(Text(f"  Version: {document.get('version')}"))
        self.console.print(f"  Emoji Enabled: {yes_no(document.get('emojiEnabled'))}")
        self.console.print(f"  Conventional Commits: {yes_no(document.get('conventionalCommits'))}")
        self.console.print(f"  Max Subject Length: {document.get('maxSubjectLength')}")
        self.console.print(f"  Max Body Length: {document.get('maxBodyLength')}")
        self.console.print()

        self.show_commit_types(document.get("commitTypes", []))

        ai = document.get("ai")
        if ai:
            self.console.print("[bold cyan]🤖 AI Configuration:[/bold cyan]")
            self.console.print(Text(f"  Provider: {ai.get('provider')}"))
            self.console.print(Text(f"  Model: {ai.get('model') or 'default'}"))
            self.console.print(Text(f"  API Key: {ai.get('apiKey') or '(not configured)'}"))
            self.console.print(Text(f"  Temperature: {ai.get('temperature')}"))
            self.console.print(Text(f"  Max Tokens: {ai.get('maxTokens')}"))
            self.console.print()

        claude = document.get("claude")
        if claude:
            self.console.print("[bold cyan]🔮 Claude Configuration:[/bold cyan]")
            self.console.print(f"  Enabled: {yes_no(claude.get('enabled'))}")
            self.console.print(Text(f"  Model: {claude.get('model')}"))
            self.console.print(Text(f"  API Key: {claude.get('apiKey') or '(not configured)'}"))
            self.console.print(Text(f"  Max Tokens: {claude.get('maxTokens')}"))
            self.console.print()

        hooks = document.get("hooks")
        if hooks is not None:
            self.console.print("[bold cyan]🔗 Git Hooks:[/bold cyan]")
            pre_commit = hooks.get("preCommit") or []
            post_commit = hooks.get("postCommit") or []
            if pre_commit:
                self.console.print(Text(f"  Pre-commit: {', '.join(pre_commit)}"))
            if post_commit:
                self.console.print(Text(f"  Post-commit: {', '.join(post_commit)}"))
            if not pre_commit and not post_commit:
                self.console.print(Text("  (no hooks configured)", style="muted"))
            self.console.print()

        self.print_rule()
        self.console.print("[muted]💡 Use[/muted] [cyan]commitweave export[/cyan] [muted]to save this configuration[/muted]")
        self.console.print("[muted]💡 Use[/muted] [cyan]commitweave doctor[/cyan] [muted]to validate configuration health[/muted]")

    def show_commit_types(self, commit_types: List[Dict[str, Any]]) -> None:
        """Show commit types in a table."""
        table = Table(title="📝 Commit Types", box=box.SIMPLE_HEAD, title_justify="left")
        table.add_column("", width=3)
        table.add_column("Type", style="commit_type")
        table.add_column("Aliases", style="scope")
        table.add_column("Description", style="muted")

        for commit_type in commit_types:
            table.add_row(
                commit_type.get("emoji", ""),
                commit_type.get("type", ""),
                ", ".join(commit_type.get("aliases") or []),
                commit_type.get("description", ""),
            )

        self.console.print(table)
        self.console.print()

    def show_diff(self, diff: List[DiffItem], summary: DiffSummary) -> None:
        """Show configuration changes colored by kind."""
        self.console.print("\n[bold cyan]📊 Configuration Changes:[/bold cyan]")
        self.print_rule()

        for item in diff:
            self.console.print(Text(format_diff_item(item), style=f"diff_{item.kind}"), soft_wrap=True)

        self.print_rule()
        self.console.print(
            f"[cyan]📈 Summary: {summary.added} added, {summary.modified} modified, "
            f"{summary.removed} removed[/cyan]"
        )

    def show_health_checks(self, checks: List[HealthCheck]) -> None:
        """Show health check results with a closing summary."""
        self.console.print("[title]🩺 Configuration Health Check[/title]")
        self.print_rule()

        icons = {"pass": "✅", "warn": "⚠️ ", "fail": "❌"}
        styles = {"pass": "green", "warn": "yellow", "fail": "red"}
        counts = {"pass": 0, "warn": 0, "fail": 0}

        for check in checks:
            counts[check.status] += 1
            line = Text(f"{icons[check.status]} ")
            line.append(f"{check.name}: ", style="bold")
            line.append(check.message, style=styles[check.status])
            self.console.print(line)
            if check.suggestion:
                self.console.print(Text(f"   💡 {check.suggestion}", style="muted"))

        self.print_rule()

        if counts["fail"] == 0 and counts["warn"] == 0:
            self.console.print("[green]🎉 Configuration is healthy! All checks passed.[/green]")
        elif counts["fail"] == 0:
            self.console.print(
                f"[yellow]⚠️  Configuration has {counts['warn']} warning(s) but is functional.[/yellow]"
            )
        else:
            self.console.print(
                f"[red]💥 Configuration has {counts['fail']} error(s) that should be addressed.[/red]"
            )

        self.console.print(
            f"[muted]   Summary: {counts['pass']} passed, {counts['warn']} warnings, "
            f"{counts['fail']} errors[/muted]"
        )
