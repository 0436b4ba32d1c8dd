"""
Job title collector.

A looser, stateless scan than the entry builder: every line that reads
like a title is collected, for cross-checking the built entries.
"""

from .line_classifier import has_education_term, has_role_keyword


class JobTitleParser:
    """Collector for title-like lines."""

    MIN_LENGTH = 5
    MAX_LENGTH = 100

    def parse(self, text: str) -> list[str]:
        """
        Collect candidate job titles.

        Args:
            text: Full resume text

        Returns:
            Title-like lines in document order, duplicates included
        """
        if not text:
            return []

        titles = []
        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if not self.MIN_LENGTH < len(line) < self.MAX_LENGTH:
                continue
            if "@" in line or "(" in line or has_education_term(line):
                continue
            if has_role_keyword(line):
                titles.append(line)

        return titles
