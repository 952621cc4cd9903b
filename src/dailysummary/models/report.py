"""Data models for generated reports."""

from typing import Optional

from pydantic import BaseModel, Field

# Length the summary prompt asks for. Summaries are measured, never truncated.
SUMMARY_CHAR_TARGET = 200


class FullReport(BaseModel):
    """Detailed, multi-section markdown report of the day's work."""

    markdown: str = Field(..., description="Markdown report text")


class SummaryReport(BaseModel):
    """Short single-line work log entry."""

    text: str = Field(..., description="Summary text")

    @property
    def char_count(self) -> int:
        return len(self.text)

    @property
    def within_target(self) -> bool:
        return self.char_count <= SUMMARY_CHAR_TARGET


class ReportBundle(BaseModel):
    """Whichever reports were produced for one run."""

    full: Optional[FullReport] = Field(None, description="Full report, if requested")
    summary: Optional[SummaryReport] = Field(None, description="Summary report, if requested")

    @property
    def is_empty(self) -> bool:
        return self.full is None and self.summary is None
