"""Configuration models."""

import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReportType(str, Enum):
    """Which reports a run produces."""

    ALL = "all"
    FULL = "full"
    SUMMARY = "summary"

    @property
    def includes_full(self) -> bool:
        return self in (ReportType.ALL, ReportType.FULL)

    @property
    def includes_summary(self) -> bool:
        return self in (ReportType.ALL, ReportType.SUMMARY)


class CliOverrides(BaseModel):
    """Values given explicitly on the command line.

    None means the flag was not given and the option falls through to the
    settings files and then to the built-in default.
    """

    api_provider: Optional[str] = Field(None, description="--api")
    api_key: Optional[str] = Field(None, description="--key")
    model: Optional[str] = Field(None, description="--model")
    report_type: Optional[str] = Field(None, description="--report")
    copy_to_clipboard: Optional[bool] = Field(None, description="--copy/--no-copy")
    repo_path: Optional[Path] = Field(None, description="--path")
    date: Optional[str] = Field(None, description="--date, as YYYY-MM-DD")
    output_file: Optional[Path] = Field(None, description="--output")


class EffectiveConfig(BaseModel):
    """Fully merged options for one invocation. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    api_provider: str = Field(..., description="Registered provider id")
    api_key: str = Field(..., min_length=1, description="API key for the provider")
    model: str = Field(..., description="Model name")
    report_type: ReportType = Field(ReportType.ALL, description="Reports to generate")
    copy_to_clipboard: bool = Field(False, description="Copy the reports to the clipboard")
    repo_path: Path = Field(..., description="Absolute path to the Git repository")
    date: Optional[datetime.date] = Field(None, description="Target day, None for today")
    output_file: Optional[Path] = Field(None, description="Where to save the markdown report")


class ProviderConfig(BaseModel):
    """Everything the completion provider needs to make a call."""

    model_config = ConfigDict(frozen=True)

    provider: str = Field(..., description="Provider id")
    base_url: Optional[str] = Field(None, description="API base URL, None for the client default")
    api_key: str = Field(..., description="API key")
    model: str = Field(..., description="Model name")
