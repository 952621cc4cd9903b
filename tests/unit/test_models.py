"""Tests for the commit and report data models."""

import importlib.util
import warnings
from datetime import date

from pydantic.warnings import PydanticDeprecatedSince20

from dailysummary.models import CommitBatch, CommitSummary, ReportBundle, SummaryReport


def test_commit_models_define_without_deprecation_warnings():
    """Test the commit models use model_config rather than a nested Config class."""
    spec = importlib.util.find_spec("dailysummary.models.commit")
    module = importlib.util.module_from_spec(spec)

    with warnings.catch_warnings():
        warnings.simplefilter("error", PydanticDeprecatedSince20)
        spec.loader.exec_module(module)

    assert module.CommitSummary.model_config["json_schema_extra"]["example"]["short_hash"] == "a1b2c3d"


def test_commit_batch_schema_example():
    """Test the schema carries the example batch."""
    schema = CommitBatch.model_json_schema()

    assert schema["example"]["branch"] == "main"
    assert len(schema["example"]["commits"]) == 2


def test_commit_batch_as_text():
    """Test the batch renders one `<hash> <subject>` line per commit."""
    batch = CommitBatch(
        commits=[
            CommitSummary(short_hash="a1b2c3", subject="Fix login bug"),
            CommitSummary(short_hash="d4e5f6", subject="Add dark mode"),
        ],
        branch="main",
        day=date(2024, 1, 15),
    )

    assert batch.as_text() == "a1b2c3 Fix login bug\nd4e5f6 Add dark mode"
    assert not batch.is_empty


def test_empty_batch():
    batch = CommitBatch(day=date(2024, 1, 15))

    assert batch.is_empty
    assert batch.branch == "unknown"
    assert batch.as_text() == ""


def test_summary_report_measures_length():
    """Test the character count against the 200 character target."""
    assert SummaryReport(text="Fixed it.").within_target
    assert not SummaryReport(text="x" * 201).within_target
    assert SummaryReport(text="x" * 201).char_count == 201
    assert ReportBundle().is_empty
