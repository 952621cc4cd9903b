"""Data models for a day of Git commits."""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CommitSummary(BaseModel):
    """A single non-merge commit, reduced to what the report needs."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "short_hash": "a1b2c3d",
                "subject": "Fix login bug",
            }
        }
    )

    short_hash: str = Field(..., description="Abbreviated commit SHA")
    subject: str = Field(..., description="First line of the commit message")

    @property
    def line(self) -> str:
        """Render the commit the way `git log --pretty="%h %s"` does."""
        return f"{self.short_hash} {self.subject}"


class CommitBatch(BaseModel):
    """All non-merge commits of one calendar day, newest first."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "commits": [
                    {"short_hash": "a1b2c3d", "subject": "Fix login bug"},
                    {"short_hash": "d4e5f6a", "subject": "Add dark mode"},
                ],
                "branch": "main",
                "day": "2024-01-15",
            }
        }
    )

    commits: List[CommitSummary] = Field(default_factory=list, description="Commits, newest first")
    branch: str = Field("unknown", description="Branch checked out in the repository")
    day: date = Field(..., description="Calendar day the commits were made on")

    @property
    def is_empty(self) -> bool:
        return not self.commits

    def as_text(self) -> str:
        """Return the commit list as newline-separated `<hash> <subject>` lines."""
        return "\n".join(commit.line for commit in self.commits)
