"""
Line classifier for resume text.

Assigns every line one coarse kind. A line often satisfies several
predicates; the first entry of ``LineClassifier.PRIORITY`` that accepts
it decides the kind.
"""

from enum import Enum
from typing import Optional

from resume_intel.utils.constants import (
    EDUCATION_TERMS,
    ROLE_KEYWORDS,
    SECTION_HEADINGS,
)

from .date_range_parser import DateRangeParser
from .location_parser import LocationParser


class LineKind(str, Enum):
    """Coarse category of a resume line."""

    SECTION_HEADING = "section_heading"
    JOB_TITLE_CANDIDATE = "job_title_candidate"
    DATE_RANGE_CANDIDATE = "date_range_candidate"
    LOCATION_CANDIDATE = "location_candidate"
    CONTENT = "content"


def has_role_keyword(line: str) -> bool:
    """Check for a role keyword, case-sensitively."""
    return any(keyword in line for keyword in ROLE_KEYWORDS)


def has_education_term(line: str) -> bool:
    lowered = line.lower()
    return any(term in lowered for term in EDUCATION_TERMS)


def has_uniform_casing(line: str) -> bool:
    """ALL CAPS, all lower, or only the first letter capitalised."""
    return (
        line == line.upper()
        or line == line.lower()
        or line == line[:1].upper() + line[1:].lower()
    )


class LineClassifier:
    """Ordered, first-match-wins classifier for single lines."""

    MAX_HEADING_LENGTH = 50
    MIN_TITLE_LENGTH = 5
    MAX_TITLE_LENGTH = 100

    PRIORITY = (
        (LineKind.SECTION_HEADING, "is_section_heading"),
        (LineKind.JOB_TITLE_CANDIDATE, "is_job_title_candidate"),
        (LineKind.DATE_RANGE_CANDIDATE, "is_date_range_candidate"),
        (LineKind.LOCATION_CANDIDATE, "is_location_candidate"),
    )

    def __init__(
        self,
        date_parser: Optional[DateRangeParser] = None,
        location_parser: Optional[LocationParser] = None,
    ):
        self.date_parser = date_parser or DateRangeParser()
        self.location_parser = location_parser or LocationParser()

    def classify(self, line: str) -> LineKind:
        """
        Classify one line.

        Args:
            line: A line of resume text; surrounding whitespace is ignored

        Returns:
            The first matching LineKind, or CONTENT
        """
        line = line.strip()
        if not line:
            return LineKind.CONTENT

        for kind, predicate in self.PRIORITY:
            if getattr(self, predicate)(line):
                return kind

        return LineKind.CONTENT

    def is_section_heading(self, line: str) -> bool:
        """
        Check whether a line is a section heading.

        Prose that merely mentions a section name is filtered out by the
        casing check.
        """
        line = line.strip()
        if not line or len(line) >= self.MAX_HEADING_LENGTH:
            return False
        if "@" in line or "(" in line:
            return False
        if not has_uniform_casing(line):
            return False

        lowered = line.lower()
        return any(heading in lowered for heading in SECTION_HEADINGS)

    def is_job_title_candidate(self, line: str) -> bool:
        line = line.strip()
        if not self.MIN_TITLE_LENGTH < len(line) < self.MAX_TITLE_LENGTH:
            return False
        if "@" in line or has_education_term(line):
            return False
        return has_role_keyword(line)

    def is_date_range_candidate(self, line: str) -> bool:
        return self.date_parser.has_range(line)

    def is_location_candidate(self, line: str) -> bool:
        return bool(self.location_parser.parse(line))
