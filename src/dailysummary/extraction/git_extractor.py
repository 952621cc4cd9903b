"""Git repository data extraction."""

from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Optional, Tuple

import git
import structlog
from git import Repo

from dailysummary.errors import GitError
from dailysummary.models import CommitBatch, CommitSummary

logger = structlog.get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"
GIT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
UNKNOWN_BRANCH = "unknown"


def parse_report_date(value: str) -> date:
    """Parse a YYYY-MM-DD string.

    Args:
        value: Date text from the command line

    Returns:
        The parsed date

    Raises:
        GitError: If the text is not a valid YYYY-MM-DD date
    """
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise GitError(f"Invalid date '{value}': expected YYYY-MM-DD") from e


def day_window(day: date) -> Tuple[datetime, datetime]:
    """Return the half-open local window [day 00:00, day+1 00:00)."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


class GitExtractor:
    """Extracts one day of commits from a Git repository."""

    def __init__(self, repo_path: Path) -> None:
        """Initialize the GitExtractor.

        Args:
            repo_path: Path to the repository or any directory inside it

        Raises:
            GitError: If the path does not exist or is not a Git repository
        """
        self.repo_path = Path(repo_path)
        if not self.repo_path.exists():
            raise GitError(f"Repository path does not exist: {self.repo_path}")

        try:
            self.repo = Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise GitError(f"Not a Git repository: {self.repo_path}") from e

    def current_branch(self) -> str:
        """Return the checked-out branch name, or "unknown" if there is none."""
        try:
            return self.repo.active_branch.name
        except (TypeError, ValueError, git.exc.GitCommandError) as e:
            # Detached HEAD raises TypeError
            logger.debug("branch_lookup_failed", repo=str(self.repo_path), error=str(e))
            return UNKNOWN_BRANCH

    def extract(self, day: Optional[date] = None) -> CommitBatch:
        """Extract the non-merge commits made on one calendar day.

        Git's --since/--until bounds are inclusive and timestamps have one
        second resolution, so the half-open window ends at 23:59:59.

        Args:
            day: Day to extract, defaults to today (local time)

        Returns:
            CommitBatch, newest commit first. Empty if nothing was committed.

        Raises:
            GitError: If git fails to list the history
        """
        day = day or date.today()
        start, end = day_window(day)
        branch = self.current_branch()

        if not self.repo.head.is_valid():
            logger.info("repository_has_no_commits", repo=str(self.repo_path))
            return CommitBatch(commits=[], branch=branch, day=day)

        try:
            commits = [
                CommitSummary(
                    short_hash=commit.hexsha[:7],
                    subject=commit.summary,
                )
                for commit in self.repo.iter_commits(
                    "HEAD",
                    since=start.strftime(GIT_TIMESTAMP_FORMAT),
                    until=(end - timedelta(seconds=1)).strftime(GIT_TIMESTAMP_FORMAT),
                    no_merges=True,
                )
            ]
        except git.exc.GitCommandError as e:
            raise GitError(f"Failed to read commits from {self.repo_path}: {e.stderr or e}") from e

        logger.info("commits_extracted", count=len(commits), branch=branch, day=day.isoformat())
        return CommitBatch(commits=commits, branch=branch, day=day)
