"""
Text intelligence pipeline for resume-intel.

Turns already-extracted plain resume text into structured facts.

Main Components:
- ResumeExtractor: Orchestrator running every parser over one text
- LineClassifier: Ordered line categorisation
- ContactParser: Emails, phones, LinkedIn handles, locations
- SectionParser: Heading-based section segmentation
- DateRangeParser: Employment date ranges with an injected clock
- ExperienceAggregator: Interval merge and total months
- ExperienceParser: Work experience entry builder
- JobTitleParser: Title candidate collector
"""

from .resume_extractor import (
    ResumeExtractor,
    ExtractionResult,
    extract,
    get_resume_extractor,
)

from .parsers import (
    AggregateExperience,
    BuilderState,
    CalendarMonth,
    ContactInfo,
    ContactParser,
    DateRange,
    DateRangeParser,
    ExperienceAggregator,
    ExperienceParser,
    JobTitleParser,
    LineClassifier,
    LineKind,
    LocationParser,
    Section,
    SectionParser,
    WorkExperienceEntry,
    merge_ranges,
    normalize_heading,
    total_months,
)

__all__ = [
    # Orchestrator
    "ResumeExtractor",
    "ExtractionResult",
    "extract",
    "get_resume_extractor",
    # Parsers
    "AggregateExperience",
    "BuilderState",
    "CalendarMonth",
    "ContactInfo",
    "ContactParser",
    "DateRange",
    "DateRangeParser",
    "ExperienceAggregator",
    "ExperienceParser",
    "JobTitleParser",
    "LineClassifier",
    "LineKind",
    "LocationParser",
    "Section",
    "SectionParser",
    "WorkExperienceEntry",
    "merge_ranges",
    "normalize_heading",
    "total_months",
]
