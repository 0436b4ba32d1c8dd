"""
Total experience aggregation.

Merges overlapping and adjacent employment date ranges before summing,
so concurrent roles (a contract alongside a permanent job, say) are not
counted twice.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from resume_intel.utils.logger import get_logger

from .date_range_parser import DateRange

logger = get_logger(__name__)


YEAR_MENTION_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")


@dataclass
class AggregateExperience:
    """Aggregate employment duration derived from date ranges."""

    total_months: int = 0
    earliest_year: Optional[int] = None
    latest_year: Optional[int] = None
    date_ranges: list[DateRange] = field(default_factory=list)
    merged_ranges: list[DateRange] = field(default_factory=list)
    year_mentions: list[int] = field(default_factory=list)

    @property
    def estimated_years(self) -> int:
        return self.total_months // 12

    @property
    def estimated_months(self) -> int:
        return self.total_months % 12


def merge_ranges(ranges: Iterable[DateRange]) -> list[DateRange]:
    """
    Coalesce overlapping or adjacent ranges into disjoint intervals.

    A range is adjacent when it starts in the month right after the running
    interval ends. A single idle month keeps two intervals apart.

    Args:
        ranges: Date ranges in any order, duplicates allowed

    Returns:
        Merged ranges sorted by start month
    """
    ordered = sorted(
        (r for r in ranges if r.start is not None and r.end is not None),
        key=lambda r: r.start,
    )
    if not ordered:
        return []

    merged: list[DateRange] = []
    current = ordered[0]

    for date_range in ordered[1:]:
        if date_range.start.index <= current.end.index + 1:
            if date_range.end > current.end:
                current = DateRange(
                    start=current.start,
                    end=date_range.end,
                    raw_text=f"{current.raw_text}; {date_range.raw_text}",
                )
        else:
            merged.append(current)
            current = date_range

    merged.append(current)
    return merged


def total_months(ranges: Iterable[DateRange]) -> int:
    """Sum the months covered by the merged ranges."""
    return sum(r.months for r in merge_ranges(ranges))


class ExperienceAggregator:
    """Aggregator turning date ranges into a total experience figure."""

    def aggregate(
        self, ranges: Iterable[DateRange], text: str = ""
    ) -> AggregateExperience:
        """
        Aggregate date ranges into total experience.

        Args:
            ranges: Parsed date ranges
            text: Source text, scanned for the earliest and latest year mentioned

        Returns:
            AggregateExperience with merged intervals and month totals
        """
        date_ranges = list(ranges)
        merged = merge_ranges(date_ranges)
        months = sum(r.months for r in merged)

        inverted = sum(1 for r in date_ranges if r.is_inverted)
        if inverted:
            logger.debug(f"{inverted} inverted date range(s) contribute no months")

        years = sorted(int(y) for y in YEAR_MENTION_PATTERN.findall(text or ""))

        logger.debug(
            f"Merged {len(date_ranges)} ranges into {len(merged)} intervals, "
            f"{months} months total"
        )

        return AggregateExperience(
            total_months=months,
            earliest_year=years[0] if years else None,
            latest_year=years[-1] if years else None,
            date_ranges=date_ranges,
            merged_ranges=merged,
            year_mentions=years,
        )
