"""Prompt templates for daily reports."""


class PromptTemplates:
    """Collection of prompt templates for the daily reports."""

    @staticmethod
    def full_report(commits: str, branch: str) -> str:
        """Generate prompt for the detailed, sectioned work report.

        Args:
            commits: Commit lines, one `<hash> <subject>` per line
            branch: Current branch name

        Returns:
            Formatted prompt
        """
        return f"""You are a professional project manager. Create a detailed daily work report based on these git commits.

Requirements:
- Use first person ("I", "We")
- Structure with clear sections (features, bug fixes, improvements, etc.)
- Use bullet points and indentation for sub-items
- Title should be max 12 words
- Include specific implementation details
- Be concise but comprehensive
- Format as markdown with sections and bullets

Git commits:
{commits}

Branch: {branch}

Generate the report now. Start with a title, then sections with bullets:"""

    @staticmethod
    def summary(context: str, commits: str, branch: str) -> str:
        """Generate prompt for the short end-of-day work log entry.

        Args:
            context: The full report, or the raw commit lines when no full
                report was generated
            commits: Commit lines, one `<hash> <subject>` per line
            branch: Current branch name

        Returns:
            Formatted prompt
        """
        return f"""You are creating a brief end-of-day work log entry (~150-200 characters, single line).

Based on this detailed report and git commits, create a concise summary.

Requirements:
- Max 200 characters
- Single sentence or two short ones
- First person ("I worked on...", "Fixed...", "Added...")
- Include feature/component name when relevant
- Professional tone
- Start with action verb

Report:
{context}

Git commits:
{commits}

Branch: {branch}

Generate the summary (keep it short and punchy):"""
