"""Interactive setup of the global settings file."""

from typing import Any, Dict, Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt

from dailysummary.llm.providers import DEFAULT_PROVIDER, PROVIDERS
from dailysummary.models import ReportType
from dailysummary.settings.store import ConfigStore, mask_secret


def ask_settings(current: Dict[str, Any], console: Console) -> Dict[str, Any]:
    """Ask for every global option, offering the current values as defaults.

    A blank answer to an API key question keeps the stored key.

    Args:
        current: Settings currently stored
        console: Console to prompt on

    Returns:
        Answers keyed by settings file key. Kept keys map to None.
    """
    answers: Dict[str, Any] = {}

    answers["api_provider"] = Prompt.ask(
        "Default API provider",
        choices=list(PROVIDERS),
        default=current.get("api_provider", DEFAULT_PROVIDER),
        console=console,
    )

    for spec in PROVIDERS.values():
        stored_key = current.get(spec.api_key_setting)
        hint = f" [dim](current: {mask_secret(stored_key)}, blank keeps it)[/dim]" if stored_key else ""
        key = Prompt.ask(
            f"{spec.name} API key{hint}",
            password=True,
            default="",
            show_default=False,
            console=console,
        )
        answers[spec.api_key_setting] = key.strip() or None

        answers[spec.model_setting] = Prompt.ask(
            f"{spec.name} model",
            default=current.get(spec.model_setting, spec.default_model),
            console=console,
        )

    answers["report_type"] = Prompt.ask(
        "Default report type",
        choices=[t.value for t in ReportType],
        default=current.get("report_type", ReportType.ALL.value),
        console=console,
    )
    answers["copy_to_clipboard"] = Confirm.ask(
        "Copy reports to the clipboard by default?",
        default=bool(current.get("copy_to_clipboard", False)),
        console=console,
    )
    return answers


def run_setup_wizard(store: ConfigStore, console: Optional[Console] = None) -> Dict[str, Any]:
    """Prompt for the global options and merge the answers into the settings file.

    Returns:
        The merged settings that were saved
    """
    console = console or Console()
    console.print(f"[bold green]Configuring:[/bold green] {store.path}\n")
    answers = ask_settings(store.load(), console)
    return store.update(answers)
