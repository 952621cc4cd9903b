"""Data models for daily reports."""

from dailysummary.models.commit import CommitBatch, CommitSummary
from dailysummary.models.config import CliOverrides, EffectiveConfig, ProviderConfig, ReportType
from dailysummary.models.report import SUMMARY_CHAR_TARGET, FullReport, ReportBundle, SummaryReport

__all__ = [
    "CommitSummary",
    "CommitBatch",
    "CliOverrides",
    "EffectiveConfig",
    "ProviderConfig",
    "ReportType",
    "FullReport",
    "SummaryReport",
    "ReportBundle",
    "SUMMARY_CHAR_TARGET",
]
