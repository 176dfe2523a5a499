"""
CLI interface using Typer with Rich integration.
"""

import asyncio
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from .config.settings import Settings
from .core import EXPORT_FORMATS, CommitWeave
from .exceptions import CommitWeaveError

# Create Typer app
app = typer.Typer(
    name="commitweave",
    help="Structured conventional commits with a managed configuration",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=False
)

# Global console for error handling
console = Console()


def setup_logging(log_level: str = "WARNING", log_file: Optional[Path] = None):
    """Setup logging configuration."""
    logger.remove()  # Remove default handler

    # Console logging with colors
    logger.add(
        sys.stderr,
        level=log_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True
    )

    # File logging
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="1 MB",
            retention="7 days"
        )


@contextmanager
def handle_errors() -> Iterator[None]:
    """Render errors with a suggestion and map them to exit codes."""
    try:
        yield
    except typer.Exit:
        raise
    except CommitWeaveError as e:
        console.print(f"[red]💥 Error:[/red] {escape(e.message)}", highlight=False)
        if e.suggestion:
            console.print(f"[yellow]💡 Suggestion:[/yellow] {escape(e.suggestion)}", highlight=False)
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        logger.exception("Unexpected error occurred")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)


def _engine() -> CommitWeave:
    return CommitWeave(Settings())


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Enable verbose logging"
    ),
    debug: bool = typer.Option(
        False, "--debug", "-d",
        help="Enable debug logging (includes verbose)"
    ),
    version: bool = typer.Option(
        False, "--version",
        help="Show version information"
    )
):
    """
    Structured conventional commits with a managed configuration.

    [bold blue]Examples:[/bold blue]

    [green]commitweave list[/green]                          # Show configuration (secrets redacted)
    [green]commitweave export --format minimal[/green]       # Shareable template
    [green]commitweave import team.json --dry-run[/green]    # Preview an import
    [green]commitweave doctor[/green]                        # Validate configuration health
    [green]commitweave commit -t feat -s "add parser"[/green]  # Build and create a commit
    """
    if version:
        from . import __version__
        console.print(f"[bold blue]CommitWeave[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        return

    settings = Settings()
    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = settings.log_level
    setup_logging(log_level, settings.log_file)


@app.command("list")
def list_command():
    """Show the current configuration with secrets redacted."""
    with handle_errors():
        _engine().list_config()


@app.command("export")
def export_command(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o",
        help="Write to a file instead of stdout"
    ),
    export_format: str = typer.Option(
        "full", "--format", "-f",
        help="full (secrets redacted) or minimal (core settings only)"
    )
):
    """Export the configuration for sharing."""
    if export_format not in EXPORT_FORMATS:
        console.print(f"[red]Invalid format:[/red] {export_format}")
        console.print(f"Valid options: {', '.join(EXPORT_FORMATS)}")
        raise typer.Exit(1)

    with handle_errors():
        _engine().export_config(output, export_format)


@app.command("import")
def import_command(
    source: str = typer.Argument(..., help="Configuration file path or http(s) URL"),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n",
        help="Show the changes without applying them"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y",
        help="Apply without asking for confirmation"
    )
):
    """Import configuration from a file or URL after previewing the changes."""
    with handle_errors():
        asyncio.run(_engine().import_config(source, dry_run=dry_run, auto_confirm=yes))


@app.command("reset")
def reset_command(
    force: bool = typer.Option(
        False, "--force", "-f",
        help="Reset without asking for confirmation"
    )
):
    """Restore the default configuration."""
    with handle_errors():
        _engine().reset_config(force=force)


@app.command("doctor")
def doctor_command():
    """Validate configuration health."""
    with handle_errors():
        checks = _engine().doctor()

    if any(check.status == "fail" for check in checks):
        raise typer.Exit(1)


@app.command("commit")
def commit_command(
    commit_type: Optional[str] = typer.Option(None, "--type", "-t", help="Commit type or alias"),
    subject: Optional[str] = typer.Option(None, "--subject", "-s", help="Short summary"),
    scope: Optional[str] = typer.Option(None, "--scope", help="Area of the codebase"),
    body: Optional[str] = typer.Option(None, "--body", "-b", help="Longer description"),
    footer: Optional[str] = typer.Option(None, "--footer", help="Footer such as issue references"),
    breaking: bool = typer.Option(False, "--breaking", help="Mark as a breaking change"),
    stage_all: bool = typer.Option(False, "--all", "-a", help="Stage all changes first"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Preview without committing"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Commit without confirmation"),
    ai: bool = typer.Option(False, "--ai", help="Fill missing fields from an AI suggestion"),
    repo_path: Optional[Path] = typer.Option(
        None, "--repo", "-r",
        help="Git repository path (default: current directory)"
    )
):
    """Build a conventional commit message and create the commit."""
    with handle_errors():
        asyncio.run(_engine().create_commit(
            commit_type=commit_type,
            subject=subject,
            scope=scope,
            body=body,
            footer=footer,
            breaking=breaking,
            stage_all=stage_all,
            dry_run=dry_run,
            auto_confirm=yes,
            use_ai=ai,
            repo_path=repo_path,
        ))


@app.command("check")
def check_command(
    message: Optional[str] = typer.Option(
        None, "--message", "-m",
        help="Message to validate (default: latest commit)"
    ),
    repo_path: Optional[Path] = typer.Option(
        None, "--repo", "-r",
        help="Git repository path (default: current directory)"
    )
):
    """Check that a commit message follows the configured conventions."""
    with handle_errors():
        result = _engine().check_commit(message, repo_path)

    if result is not None and not result.valid:
        raise typer.Exit(1)


def main():
    """Main entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
