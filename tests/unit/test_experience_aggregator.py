"""
Tests for resume_intel.nlp.parsers.experience_aggregator — interval merge and totals.
"""

import pytest

from resume_intel.nlp.parsers.date_range_parser import CalendarMonth
from resume_intel.nlp.parsers.experience_aggregator import (
    ExperienceAggregator,
    merge_ranges,
    total_months,
)


@pytest.fixture
def aggregator():
    return ExperienceAggregator()


# ── merge_ranges / total_months ──────────────────────────────────────────────


class TestIntervalMerge:
    def test_overlapping_ranges_are_not_double_counted(self, make_range):
        ranges = [make_range((2020, 1), (2021, 6)), make_range((2021, 3), (2021, 12))]
        assert total_months(ranges) == 24
        assert len(merge_ranges(ranges)) == 1

    def test_adjacent_months_merge_into_one_interval(self, make_range):
        ranges = [make_range((2020, 1), (2020, 12)), make_range((2021, 1), (2021, 12))]
        merged = merge_ranges(ranges)
        assert len(merged) == 1
        assert merged[0].start == CalendarMonth(2020, 0)
        assert merged[0].end == CalendarMonth(2021, 11)
        assert total_months(ranges) == 24

    def test_one_idle_month_keeps_intervals_apart(self, make_range):
        ranges = [make_range((2020, 1), (2020, 12)), make_range((2021, 2), (2021, 12))]
        assert len(merge_ranges(ranges)) == 2
        assert total_months(ranges) == 23

    def test_non_overlapping_ranges_do_not_merge(self, make_range):
        ranges = [make_range((2018, 1), (2018, 12)), make_range((2020, 1), (2020, 12))]
        assert len(merge_ranges(ranges)) == 2
        assert total_months(ranges) == 24

    def test_same_month_boundary_merges(self, make_range):
        ranges = [make_range((2020, 1), (2020, 6)), make_range((2020, 6), (2020, 12))]
        assert len(merge_ranges(ranges)) == 1
        assert total_months(ranges) == 12

    def test_contained_range_adds_nothing(self, make_range):
        ranges = [make_range((2020, 1), (2022, 12)), make_range((2021, 3), (2021, 6))]
        assert total_months(ranges) == 36

    def test_input_order_does_not_matter(self, make_range):
        ranges = [make_range((2021, 3), (2021, 12)), make_range((2020, 1), (2021, 6))]
        merged = merge_ranges(ranges)
        assert merged[0].start == CalendarMonth(2020, 0)
        assert total_months(ranges) == 24

    def test_duplicates_count_once(self, make_range):
        ranges = [make_range((2020, 1), (2020, 12))] * 2
        assert total_months(ranges) == 12

    def test_inverted_range_contributes_zero(self, make_range):
        ranges = [make_range((2024, 1), (2020, 1)), make_range((2018, 1), (2018, 12))]
        assert total_months(ranges) == 12

    def test_empty(self):
        assert merge_ranges([]) == []
        assert total_months([]) == 0


# ── ExperienceAggregator.aggregate ───────────────────────────────────────────


class TestAggregate:
    def test_years_and_months_split(self, aggregator, make_range):
        result = aggregator.aggregate([make_range((2020, 1), (2022, 6))])
        assert result.total_months == 30
        assert result.estimated_years == 2
        assert result.estimated_months == 6

    def test_keeps_original_and_merged_ranges(self, aggregator, make_range):
        ranges = [make_range((2020, 1), (2021, 6)), make_range((2021, 3), (2021, 12))]
        result = aggregator.aggregate(ranges)
        assert result.date_ranges == ranges
        assert len(result.merged_ranges) == 1

    def test_year_mentions_from_text(self, aggregator):
        result = aggregator.aggregate([], "Graduated 2014. Joined Acme in 2016, left 2021.")
        assert result.earliest_year == 2014
        assert result.latest_year == 2021
        assert result.year_mentions == [2014, 2016, 2021]
        assert result.total_months == 0

    def test_no_years_means_none(self, aggregator):
        result = aggregator.aggregate([], "No dates here")
        assert result.earliest_year is None
        assert result.latest_year is None
