"""
Date range parser for resume text.

Recognizes employment date ranges written in several common grammars
and normalizes them to pairs of calendar months.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Union

from resume_intel.utils.constants import MONTH_NUMBERS, PRESENT_TOKENS
from resume_intel.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, order=True)
class CalendarMonth:
    """A calendar month; month is 0-based (0 = January)."""

    year: int
    month: int

    @classmethod
    def from_date(cls, value: date) -> "CalendarMonth":
        return cls(value.year, value.month - 1)

    @property
    def index(self) -> int:
        """Months since year zero, for arithmetic."""
        return self.year * 12 + self.month

    def months_until(self, other: "CalendarMonth") -> int:
        """Signed number of month boundaries between self and other."""
        return other.index - self.index

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}"


@dataclass(frozen=True)
class DateRange:
    """A parsed date range. end >= start is not guaranteed."""

    start: CalendarMonth
    end: CalendarMonth
    raw_text: str = ""

    @property
    def months(self) -> int:
        """Months covered, counting both the start and end month; never negative."""
        return max(0, self.start.months_until(self.end) + 1)

    @property
    def is_inverted(self) -> bool:
        return self.end < self.start


# today may be a fixed date or a zero-argument callable returning one
Clock = Union[date, Callable[[], date], None]


_MONTH = (
    r"(?:January|February|March|April|May|June|July|August|September|October|November|December"
    r"|Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
)
_SEP = r"\s*[-–—]\s*"
_PRESENT = r"(?:Present|Current|Now)"


@dataclass(frozen=True)
class _RangeMatch:
    """A grammar hit inside one line, before endpoint parsing."""

    start_text: str
    end_text: str
    raw_text: str
    span: tuple[int, int]
    priority: int


class DateRangeParser:
    """
    Parser for employment date ranges.

    The clock used for open-ended ranges ("Present", "Current", "Now") is
    injected through ``today`` so results are reproducible.
    """

    # Tried in this order; all matches are kept
    RANGE_PATTERNS = [
        # Jan 2020 - Dec 2021
        re.compile(
            rf"\b(?P<start>{_MONTH}\s+\d{{4}}){_SEP}(?P<end>{_MONTH}\s+\d{{4}})\b",
            re.IGNORECASE,
        ),
        # Jan 2020 - Present
        re.compile(
            rf"\b(?P<start>{_MONTH}\s+\d{{4}}){_SEP}(?P<end>{_PRESENT})\b",
            re.IGNORECASE,
        ),
        # 01/2020 - 12/2021
        re.compile(r"\b(?P<start>\d{1,2}/\d{4})" + _SEP + r"(?P<end>\d{1,2}/\d{4})\b"),
        # 2020 - 2021
        re.compile(r"\b(?P<start>\d{4})" + _SEP + r"(?P<end>\d{4})\b"),
        # 2020 - Present
        re.compile(rf"\b(?P<start>\d{{4}}){_SEP}(?P<end>{_PRESENT})\b", re.IGNORECASE),
    ]

    MONTH_YEAR_PATTERN = re.compile(rf"\b({_MONTH})\s+(\d{{4}})\b", re.IGNORECASE)
    NUMERIC_MONTH_PATTERN = re.compile(r"\b(\d{1,2})/(\d{4})\b")
    YEAR_PATTERN = re.compile(r"\b(\d{4})\b")

    def __init__(self, today: Clock = None):
        """
        Initialize the parser.

        Args:
            today: Fixed date, zero-argument callable, or None for the system date
        """
        self._today = today

    def today(self) -> CalendarMonth:
        """The month that open-ended ranges end in."""
        if self._today is None:
            value = date.today()
        elif callable(self._today):
            value = self._today()
        else:
            value = self._today
        return CalendarMonth.from_date(value)

    def parse(self, text: str) -> list[DateRange]:
        """
        Parse every date range in a block of text.

        Args:
            text: Full resume text or a section of it

        Returns:
            Date ranges in document order
        """
        if not text:
            return []

        today = self.today()
        ranges: list[DateRange] = []
        for line in text.split("\n"):
            ranges.extend(self._parse_line(line, today, deduplicate=True))

        logger.debug(f"Parsed {len(ranges)} date ranges")
        return ranges

    def parse_line(self, line: str) -> list[DateRange]:
        """
        Parse a single line against every grammar.

        Overlapping hits from different grammars are all returned; callers
        that aggregate should use ``parse``, which removes them.
        """
        return self._parse_line(line, self.today(), deduplicate=False)

    def has_range(self, line: str) -> bool:
        """Check whether any grammar matches the line."""
        return any(pattern.search(line) for pattern in self.RANGE_PATTERNS)

    def _parse_line(
        self, line: str, today: CalendarMonth, deduplicate: bool
    ) -> list[DateRange]:
        matches = self._find_matches(line)
        if deduplicate:
            matches = self._drop_nested(matches)

        ranges = []
        for match in matches:
            date_range = self._to_range(match, today)
            if date_range is not None:
                ranges.append(date_range)
        return ranges

    def _find_matches(self, line: str) -> list[_RangeMatch]:
        matches = []
        for priority, pattern in enumerate(self.RANGE_PATTERNS):
            for match in pattern.finditer(line):
                matches.append(
                    _RangeMatch(
                        start_text=match.group("start"),
                        end_text=match.group("end"),
                        raw_text=match.group(0),
                        span=match.span(),
                        priority=priority,
                    )
                )
        return matches

    @staticmethod
    def _drop_nested(matches: list[_RangeMatch]) -> list[_RangeMatch]:
        """Drop hits lying inside a higher-priority hit, e.g. "2020 - Present" in "May 2020 - Present"."""
        kept: list[_RangeMatch] = []
        for match in matches:
            nested = any(
                other.priority < match.priority
                and other.span[0] <= match.span[0]
                and match.span[1] <= other.span[1]
                for other in kept
            )
            if not nested:
                kept.append(match)

        kept.sort(key=lambda m: m.span[0])
        return kept

    def _to_range(
        self, match: _RangeMatch, today: CalendarMonth
    ) -> Optional[DateRange]:
        start = self.parse_date(match.start_text)
        if match.end_text.lower() in PRESENT_TOKENS:
            end = today
        else:
            end = self.parse_date(match.end_text)

        if start is None or end is None:
            logger.debug(f"Discarding unparsable range: {match.raw_text!r}")
            return None

        return DateRange(start=start, end=end, raw_text=match.raw_text)

    def parse_date(self, token: str) -> Optional[CalendarMonth]:
        """
        Parse a single date token.

        Recognizes "Month Year", "MM/YYYY" and bare "YYYY" (January),
        in that order.
        """
        if not token:
            return None

        month_year = self.MONTH_YEAR_PATTERN.search(token)
        if month_year:
            month = MONTH_NUMBERS[month_year.group(1).lower()]
            return CalendarMonth(int(month_year.group(2)), month)

        numeric = self.NUMERIC_MONTH_PATTERN.search(token)
        if numeric:
            month = int(numeric.group(1))
            if not 1 <= month <= 12:
                return None
            return CalendarMonth(int(numeric.group(2)), month - 1)

        year = self.YEAR_PATTERN.search(token)
        if year:
            return CalendarMonth(int(year.group(1)), 0)

        return None
