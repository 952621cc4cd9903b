"""Commit extraction from local Git repositories."""

from dailysummary.extraction.git_extractor import GitExtractor, day_window, parse_report_date

__all__ = ["GitExtractor", "day_window", "parse_report_date"]
