"""Error types raised by daily-summary.

Every fatal condition is a subclass of DailySummaryError so the CLI can
report it with a one-line message and a non-zero exit status.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from dailysummary.models.report import ReportBundle


class DailySummaryError(Exception):
    """Base class for all daily-summary errors."""


class ConfigError(DailySummaryError):
    """A configuration option is missing or invalid."""


class MissingCredentialError(ConfigError):
    """No API key could be found for the selected provider."""

    def __init__(self, provider: str, env_var: str) -> None:
        self.provider = provider
        self.env_var = env_var
        super().__init__(
            f"No API key configured for provider '{provider}'. Pass one with --key, "
            f"save it in the settings file with --init, "
            f"or set the {env_var} environment variable."
        )


class GitError(DailySummaryError):
    """The repository could not be read or the date is malformed."""


class ProviderError(DailySummaryError):
    """The completion provider failed (network, auth, rate limit, bad response).

    Attributes:
        partial: Reports that were generated before the failure, if any
    """

    def __init__(self, message: str, partial: Optional["ReportBundle"] = None) -> None:
        super().__init__(message)
        self.partial = partial


class ClipboardError(DailySummaryError):
    """Writing to the system clipboard failed."""


class ReportIOError(DailySummaryError):
    """Saving a report to disk failed."""
