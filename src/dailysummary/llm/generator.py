"""Report generation from a day of commits."""

from typing import Optional

import structlog

from dailysummary.errors import ProviderError
from dailysummary.llm.base import BaseLLMProvider
from dailysummary.llm.prompts import PromptTemplates
from dailysummary.models import (
    SUMMARY_CHAR_TARGET,
    CommitBatch,
    FullReport,
    ReportBundle,
    ReportType,
    SummaryReport,
)

logger = structlog.get_logger(__name__)


class ReportGenerator:
    """Turns a CommitBatch into full and summary reports.

    The generator knows nothing about which provider it talks to; the
    provider is chosen and configured before it is handed over.
    """

    def __init__(self, provider: BaseLLMProvider) -> None:
        """Initialize report generator.

        Args:
            provider: Completion provider used for every call
        """
        self.provider = provider
        self.prompts = PromptTemplates()

    async def generate_full(self, batch: CommitBatch) -> FullReport:
        """Generate the detailed markdown report.

        Raises:
            ProviderError: If the completion call fails
        """
        prompt = self.prompts.full_report(batch.as_text(), batch.branch)
        text = await self.provider.complete(prompt)
        logger.info("full_report_generated", chars=len(text))
        return FullReport(markdown=text)

    async def generate_summary(
        self,
        batch: CommitBatch,
        context: Optional[FullReport] = None,
    ) -> SummaryReport:
        """Generate the short work log entry.

        Args:
            batch: The day's commits
            context: Full report to summarize. Without one, the raw commit
                list is used as context instead.

        Raises:
            ProviderError: If the completion call fails
        """
        commits = batch.as_text()
        context_text = context.markdown if context is not None else commits
        prompt = self.prompts.summary(context_text, commits, batch.branch)
        summary = SummaryReport(text=await self.provider.complete(prompt))

        if not summary.within_target:
            logger.warning(
                "summary_over_target",
                chars=summary.char_count,
                target=SUMMARY_CHAR_TARGET,
            )
        else:
            logger.info("summary_generated", chars=summary.char_count)
        return summary

    async def generate(self, batch: CommitBatch, report_type: ReportType) -> ReportBundle:
        """Generate every report the run asked for, one call after another.

        The summary uses the full report as context when one was generated.

        Raises:
            ProviderError: If a call fails. When the full report succeeded
                and the summary failed, the error carries the full report in
                its ``partial`` attribute.
        """
        bundle = ReportBundle()

        if report_type.includes_full:
            bundle.full = await self.generate_full(batch)

        if report_type.includes_summary:
            try:
                bundle.summary = await self.generate_summary(batch, bundle.full)
            except ProviderError as e:
                if bundle.full is not None:
                    raise ProviderError(str(e), partial=bundle) from e
                raise

        return bundle
