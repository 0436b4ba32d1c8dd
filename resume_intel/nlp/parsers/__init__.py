"""
Resume text parsers for extracting structured information.

Each parser is a pure function of the input text and is responsible for
one kind of fact (contact channels, sections, date ranges, work entries,
titles). Import order matters: the line classifier builds on the date
and location parsers, and the section and entry builders build on it.
"""

from .location_parser import LocationParser
from .date_range_parser import CalendarMonth, DateRange, DateRangeParser
from .experience_aggregator import (
    AggregateExperience,
    ExperienceAggregator,
    merge_ranges,
    total_months,
)
from .line_classifier import LineClassifier, LineKind
from .contact_parser import ContactParser, ContactInfo
from .section_parser import SectionParser, Section, normalize_heading
from .experience_parser import ExperienceParser, WorkExperienceEntry, BuilderState
from .job_title_parser import JobTitleParser

__all__ = [
    "LocationParser",
    "CalendarMonth",
    "DateRange",
    "DateRangeParser",
    "AggregateExperience",
    "ExperienceAggregator",
    "merge_ranges",
    "total_months",
    "LineClassifier",
    "LineKind",
    "ContactParser",
    "ContactInfo",
    "SectionParser",
    "Section",
    "normalize_heading",
    "ExperienceParser",
    "WorkExperienceEntry",
    "BuilderState",
    "JobTitleParser",
]
