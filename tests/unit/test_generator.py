"""Tests for report generation."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from dailysummary.errors import ProviderError
from dailysummary.llm import PromptTemplates, ReportGenerator
from dailysummary.models import CommitBatch, CommitSummary, FullReport, ReportType

FULL_TEXT = "# Auth and theming\n\n## Bug fixes\n- Fixed login bug"
SUMMARY_TEXT = "Fixed the login bug and added dark mode to the settings page."


@pytest.fixture
def batch():
    """Two commits on main."""
    return CommitBatch(
        commits=[
            CommitSummary(short_hash="a1b2c3", subject="Fix login bug"),
            CommitSummary(short_hash="d4e5f6", subject="Add dark mode"),
        ],
        branch="main",
        day=date(2024, 1, 15),
    )


@pytest.fixture
def mock_provider():
    """Create mock LLM provider answering full report, then summary."""
    provider = MagicMock()
    provider.model = "gpt-4o-mini"
    provider.complete = AsyncMock(side_effect=[FULL_TEXT, SUMMARY_TEXT])
    return provider


@pytest.fixture
def generator(mock_provider):
    return ReportGenerator(mock_provider)


def prompt_of(mock_provider, call_index):
    return mock_provider.complete.call_args_list[call_index].args[0]


@pytest.mark.asyncio
async def test_generate_full(generator, mock_provider, batch):
    """Test the full report prompt carries the commits and branch."""
    report = await generator.generate_full(batch)

    assert report.markdown == FULL_TEXT
    prompt = prompt_of(mock_provider, 0)
    assert "a1b2c3 Fix login bug\nd4e5f6 Add dark mode" in prompt
    assert "Branch: main" in prompt
    assert "max 12 words" in prompt
    assert "first person" in prompt


@pytest.mark.asyncio
async def test_generate_all_uses_full_report_as_context(generator, mock_provider, batch):
    """Test the summary is built from the full report when both are requested."""
    bundle = await generator.generate(batch, ReportType.ALL)

    assert bundle.full.markdown == FULL_TEXT
    assert bundle.summary.text == SUMMARY_TEXT
    assert mock_provider.complete.call_count == 2

    summary_prompt = prompt_of(mock_provider, 1)
    assert f"Report:\n{FULL_TEXT}\n" in summary_prompt
    assert "a1b2c3 Fix login bug" in summary_prompt
    assert "Branch: main" in summary_prompt


@pytest.mark.asyncio
async def test_summary_only_uses_raw_commits_as_context(batch):
    """Test summary-only runs feed the raw commit list, not a report, as context."""
    provider = MagicMock()
    provider.complete = AsyncMock(return_value=SUMMARY_TEXT)
    generator = ReportGenerator(provider)

    bundle = await generator.generate(batch, ReportType.SUMMARY)

    assert bundle.full is None
    assert bundle.summary.text == SUMMARY_TEXT
    provider.complete.assert_called_once()

    prompt = prompt_of(provider, 0)
    commits = "a1b2c3 Fix login bug\nd4e5f6 Add dark mode"
    assert prompt == PromptTemplates.summary(commits, commits, "main")
    assert f"Report:\n{commits}\n" in prompt
    assert FULL_TEXT not in prompt


@pytest.mark.asyncio
async def test_generate_full_only(generator, mock_provider, batch):
    """Test full-only runs make exactly one call."""
    bundle = await generator.generate(batch, ReportType.FULL)

    assert bundle.full.markdown == FULL_TEXT
    assert bundle.summary is None
    assert mock_provider.complete.call_count == 1


@pytest.mark.asyncio
async def test_generate_summary_with_explicit_context(generator, mock_provider, batch):
    """Test generate_summary with a given full report."""
    mock_provider.complete = AsyncMock(return_value=SUMMARY_TEXT)

    await generator.generate_summary(batch, FullReport(markdown="Custom context"))

    assert "Report:\nCustom context\n" in prompt_of(mock_provider, 0)


@pytest.mark.asyncio
async def test_long_summary_is_measured_not_truncated(batch):
    """Test a summary over 200 characters is kept whole with its length."""
    long_text = "Implemented " + "a very detailed change " * 12
    provider = MagicMock()
    provider.complete = AsyncMock(return_value=long_text)

    summary = await ReportGenerator(provider).generate_summary(batch)

    assert summary.text == long_text
    assert summary.char_count == len(long_text)
    assert summary.char_count > 200
    assert not summary.within_target


@pytest.mark.asyncio
async def test_summary_failure_keeps_full_report(generator, mock_provider, batch):
    """Test a failing summary call still hands back the finished full report."""
    mock_provider.complete = AsyncMock(
        side_effect=[FULL_TEXT, ProviderError("openai API error: rate limited")]
    )

    with pytest.raises(ProviderError, match="rate limited") as exc_info:
        await generator.generate(batch, ReportType.ALL)

    partial = exc_info.value.partial
    assert partial is not None
    assert partial.full.markdown == FULL_TEXT
    assert partial.summary is None


@pytest.mark.asyncio
async def test_full_failure_has_no_partial(generator, mock_provider, batch):
    """Test a failing first call stops the run without a partial result."""
    mock_provider.complete = AsyncMock(side_effect=ProviderError("openai API error: bad key"))

    with pytest.raises(ProviderError) as exc_info:
        await generator.generate(batch, ReportType.ALL)

    assert exc_info.value.partial is None
    assert mock_provider.complete.call_count == 1


@pytest.mark.asyncio
async def test_summary_only_failure_has_no_partial(batch):
    """Test a failing summary-only run has nothing to show."""
    provider = MagicMock()
    provider.complete = AsyncMock(side_effect=ProviderError("openai API error: timeout"))

    with pytest.raises(ProviderError) as exc_info:
        await ReportGenerator(provider).generate(batch, ReportType.SUMMARY)

    assert exc_info.value.partial is None
