"""Command-line interface for Daily Summary."""

import asyncio
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dailysummary.errors import DailySummaryError, MissingCredentialError, ProviderError
from dailysummary.extraction import GitExtractor
from dailysummary.llm import ReportGenerator, create_provider, provider_config_for
from dailysummary.models import CliOverrides, CommitBatch, EffectiveConfig, ReportBundle
from dailysummary.output import (
    build_markdown_document,
    clipboard_text,
    copy_to_clipboard,
    default_report_filename,
    render_reports,
    save_report,
)
from dailysummary.settings import ConfigResolver, ConfigStore, EnvironmentSettings
from dailysummary.settings.wizard import run_setup_wizard

app = typer.Typer(
    name="daily-summary",
    help="Generate a daily work report from today's git commits with an LLM",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)

RULE = "═" * 70
NO_COMMITS_MESSAGE = "\n[yellow]⚠️  No commits found for the specified date.[/yellow]"


def configure_logging(verbose: bool = False) -> None:
    """Send structlog output to stderr, WARNING and up unless verbose."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.WARNING
        ),
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
    )


def _fail(error: Exception) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    raise typer.Exit(1)


def _print_header(config: EffectiveConfig, batch: CommitBatch) -> None:
    console.print("\n[bold]🎯 Daily Commit Summary Generator[/bold]")
    console.print(RULE)
    console.print(f"📍 Repository: {escape(str(config.repo_path))}")
    console.print(f"🌿 Branch: {escape(batch.branch)}")
    console.print(f"📅 Date: {config.date.isoformat() if config.date else 'Today'}")
    console.print(f"📊 Reports: {config.report_type.value.upper()}")
    console.print(f"🤖 API: {config.api_provider}")
    console.print(f"🎯 Model: {escape(config.model)}")
    if config.copy_to_clipboard:
        console.print("📋 Will copy to clipboard")
    console.print(RULE)


def _show_config(store: ConfigStore) -> None:
    """Print the global settings with secrets masked."""
    settings = store.redacted()
    console.print(f"[bold]Global settings:[/bold] {escape(str(store.path))}\n")

    if not settings:
        console.print("[yellow]No settings saved yet. Run with --init to create them.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key in sorted(settings):
        table.add_row(key, escape(str(settings[key])))
    console.print(table)


def _generate(generator: ReportGenerator, batch: CommitBatch, config: EffectiveConfig) -> ReportBundle:
    """Run the report generation, showing any partial result before failing."""
    try:
        with console.status("🔄 Generating reports..."):
            return asyncio.run(generator.generate(batch, config.report_type))
    except ProviderError as e:
        if e.partial is not None and not e.partial.is_empty:
            console.print(render_reports(e.partial, batch.day), markup=False, highlight=False, soft_wrap=True)
        raise


def _deliver(bundle: ReportBundle, config: EffectiveConfig, day: date, save: bool) -> None:
    """Copy and save the reports as requested."""
    if config.copy_to_clipboard:
        copy_to_clipboard(clipboard_text(bundle))
        console.print("[bold green]✓[/bold green] Copied to clipboard")

    output_file = config.output_file
    if output_file is None and save:
        output_file = Path(default_report_filename(day))
    if output_file is not None:
        saved = save_report(build_markdown_document(bundle, day), output_file)
        console.print(f"[bold green]✓[/bold green] Saved to {escape(str(saved))}")


@app.command()
def main(
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Path to the Git repository (default: current directory)"),
    date_str: Optional[str] = typer.Option(None, "--date", "-d", help="Date in YYYY-MM-DD format (default: today)"),
    report: Optional[str] = typer.Option(None, "--report", "-r", help="Reports to generate: all, full or summary"),
    api: Optional[str] = typer.Option(None, "--api", "-a", help="API provider: openai or perplexity"),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="API key for this run"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model name for this run"),
    copy: Optional[bool] = typer.Option(None, "--copy/--no-copy", help="Copy reports to the clipboard"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the reports to this markdown file"),
    save: bool = typer.Option(False, "--save", help="Save the reports to daily-report-<date>.md"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    init: bool = typer.Option(False, "--init", help="Interactively set up the global settings"),
    show_config: bool = typer.Option(False, "--config", help="Show the global settings (keys masked)"),
) -> None:
    """Summarize a day of git commits into a full report and a short work log entry.

    Examples:

      daily-summary

      daily-summary -p ~/projects/myapp -r full

      daily-summary -d 2026-01-05 -r summary --copy
    """
    configure_logging(verbose)

    try:
        environment = EnvironmentSettings()

        if init:
            run_setup_wizard(ConfigStore(environment.global_config_path), console)
            console.print("[bold green]✓[/bold green] Settings saved")
            return

        if show_config:
            _show_config(ConfigStore(environment.global_config_path))
            return

        resolver = ConfigResolver.discover(environment=environment)
        overrides = CliOverrides(
            api_provider=api,
            api_key=key,
            model=model,
            report_type=report,
            copy_to_clipboard=copy,
            repo_path=path,
            date=date_str,
            output_file=output,
        )
        try:
            config = resolver.resolve(overrides)
        except MissingCredentialError:
            repo_path, day = resolver.resolve_target(overrides)
            if GitExtractor(repo_path).extract(day).is_empty:
                console.print(NO_COMMITS_MESSAGE)
                return
            raise

        extractor = GitExtractor(config.repo_path)
        batch = extractor.extract(config.date)
        _print_header(config, batch)

        if batch.is_empty:
            console.print(NO_COMMITS_MESSAGE)
            return

        console.print(f"\n[bold green]✓[/bold green] Found {len(batch.commits)} commits:")
        for commit in batch.commits:
            console.print(f"  [cyan]{commit.short_hash}[/cyan] {escape(commit.subject)}")

        provider = create_provider(provider_config_for(config))
        bundle = _generate(ReportGenerator(provider), batch, config)
        console.print(render_reports(bundle, batch.day), markup=False, highlight=False, soft_wrap=True)

        if verbose:
            stats = provider.get_usage_stats()
            console.print(
                f"[dim]{stats['calls']} calls, "
                f"{stats['total_tokens']['input']} input / {stats['total_tokens']['output']} output tokens[/dim]"
            )

        _deliver(bundle, config, batch.day, save)

    except DailySummaryError as e:
        _fail(e)


if __name__ == "__main__":
    app()
