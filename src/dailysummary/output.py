"""Rendering, clipboard and file output for generated reports."""

from datetime import date
from pathlib import Path

import pyperclip
import structlog

from dailysummary.errors import ClipboardError, ReportIOError
from dailysummary.models import SUMMARY_CHAR_TARGET, ReportBundle

logger = structlog.get_logger(__name__)

RULE_WIDTH = 70
CLIPBOARD_SEPARATOR = "\n\n---\n\n"


def render_reports(bundle: ReportBundle, day: date) -> str:
    """Format the reports for the terminal."""
    heavy = "═" * RULE_WIDTH
    light = "─" * RULE_WIDTH
    lines = ["", heavy, f"📅 Daily Report - {day.isoformat()}", heavy, ""]

    if bundle.full is not None:
        lines += ["📋 FULL REPORT", light, bundle.full.markdown, ""]

    if bundle.summary is not None:
        lines += [
            "⏱️  SUMMARY",
            light,
            f'"{bundle.summary.text}"',
            f"📊 Characters: {bundle.summary.char_count}/{SUMMARY_CHAR_TARGET}",
            "",
        ]

    lines.append(heavy)
    return "\n".join(lines) + "\n"


def clipboard_text(bundle: ReportBundle) -> str:
    """Join the reports that exist for pasting elsewhere."""
    parts = []
    if bundle.full is not None:
        parts.append(bundle.full.markdown)
    if bundle.summary is not None:
        parts.append(bundle.summary.text)
    return CLIPBOARD_SEPARATOR.join(parts)


def copy_to_clipboard(text: str) -> None:
    """Copy text to the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available or it fails
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Could not copy to clipboard: {e}") from e
    logger.info("copied_to_clipboard", chars=len(text))


def default_report_filename(day: date) -> str:
    return f"daily-report-{day.isoformat()}.md"


def build_markdown_document(bundle: ReportBundle, day: date) -> str:
    """Build the markdown file content for the reports."""
    content = f"# Daily Report - {day.isoformat()}\n\n"
    if bundle.full is not None:
        content += f"## Full Report\n\n{bundle.full.markdown}\n\n"
    if bundle.summary is not None:
        content += f"## Summary\n\n{bundle.summary.text}\n\n"
    return content


def save_report(content: str, path: Path) -> Path:
    """Write report content to a file, creating parent directories.

    Raises:
        ReportIOError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ReportIOError(f"Could not save report to {path}: {e}") from e
    logger.info("report_saved", path=str(path))
    return path
