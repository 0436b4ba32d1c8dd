"""
Main resume text extraction orchestrator.

Runs every component parser over one piece of plain resume text and
collects their independent outputs into a single result.
"""

import copy
import hashlib
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Optional

from resume_intel.utils.config import get_settings
from resume_intel.utils.constants import HEADER_SECTION
from resume_intel.utils.logger import get_logger

from .parsers import (
    AggregateExperience,
    ContactInfo,
    ContactParser,
    DateRange,
    DateRangeParser,
    ExperienceAggregator,
    ExperienceParser,
    JobTitleParser,
    LineClassifier,
    LocationParser,
    SectionParser,
    WorkExperienceEntry,
)
from .parsers.date_range_parser import CalendarMonth, Clock

logger = get_logger(__name__)


@dataclass
class ExtractionResult:
    """Complete result of resume text extraction."""

    contact: ContactInfo = field(default_factory=ContactInfo)
    sections: dict[str, str] = field(default_factory=dict)
    experience: AggregateExperience = field(default_factory=AggregateExperience)
    work_entries: list[WorkExperienceEntry] = field(default_factory=list)
    job_titles: list[str] = field(default_factory=list)

    # Processing info
    processing_time_ms: int = field(default=0, compare=False)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when nothing at all was detected."""
        return (
            self.contact.is_empty
            and not self.sections
            and not self.experience.date_ranges
            and not self.work_entries
            and not self.job_titles
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain JSON-ready data; months are rendered as YYYY-MM."""
        experience = self.experience
        return {
            "contact": {
                "emails": list(self.contact.emails),
                "phones": list(self.contact.phones),
                "professional_handles": list(self.contact.professional_handles),
                "locations": list(self.contact.locations),
            },
            "sections": dict(self.sections),
            "experience": {
                "total_months": experience.total_months,
                "estimated_years": experience.estimated_years,
                "estimated_months": experience.estimated_months,
                "earliest_year": experience.earliest_year,
                "latest_year": experience.latest_year,
                "date_ranges": [_range_to_dict(r) for r in experience.date_ranges],
                "merged_ranges": [_range_to_dict(r) for r in experience.merged_ranges],
            },
            "work_entries": [
                {
                    "title": e.title,
                    "company": e.company,
                    "duration": e.duration,
                    "location": e.location,
                    "description_bullets": list(e.description_bullets),
                }
                for e in self.work_entries
            ],
            "job_titles": list(self.job_titles),
            "warnings": list(self.warnings),
        }


def _range_to_dict(date_range: DateRange) -> dict[str, Any]:
    return {
        "start": str(date_range.start),
        "end": str(date_range.end),
        "raw_text": date_range.raw_text,
        "months": date_range.months,
    }


class ResumeExtractor:
    """
    Main extractor that runs the text intelligence pipeline.

    Pipeline:
    1. Contact channels (emails, phones, handles, locations)
    2. Section segmentation
    3. Date ranges and aggregate experience
    4. Work experience entries
    5. Job title candidates

    Every step is a pure function of the text, so results are memoised
    on a hash of the text and the month used for open-ended ranges.
    """

    def __init__(self, today: Clock = None, cache_size: Optional[int] = None):
        """
        Initialize the extractor with all component parsers.

        Args:
            today: Clock for "Present" end dates (fixed date, callable, or None)
            cache_size: Memoised results to keep; defaults to settings, 0 disables
        """
        settings = get_settings().extraction
        self.cache_size = settings.cache_size if cache_size is None else cache_size
        self.max_text_length = settings.max_text_length

        self.location_parser = LocationParser()
        self.date_parser = DateRangeParser(today=today)
        self.classifier = LineClassifier(
            date_parser=self.date_parser,
            location_parser=self.location_parser,
        )
        self.contact_parser = ContactParser(location_parser=self.location_parser)
        self.section_parser = SectionParser(classifier=self.classifier)
        self.aggregator = ExperienceAggregator()
        self.experience_parser = ExperienceParser(
            classifier=self.classifier,
            location_parser=self.location_parser,
        )
        self.job_title_parser = JobTitleParser()

        # Per-instance LRU rather than functools.lru_cache: the key carries the
        # clock month, and a cached method would hold on to self.
        self._cache: OrderedDict[tuple[str, CalendarMonth], ExtractionResult] = OrderedDict()

    def extract(self, text: Optional[str]) -> ExtractionResult:
        """
        Extract structured facts from plain resume text.

        Never raises for malformed or ambiguous text; anything that cannot
        be recognized is simply absent from the result.

        Args:
            text: Already-decoded plain text

        Returns:
            ExtractionResult with every component's output
        """
        if text is None:
            text = ""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")

        today = self.date_parser.today()
        key = (hashlib.sha256(text.encode("utf-8")).hexdigest(), today)

        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            logger.debug("Extraction cache hit")
            return copy.deepcopy(cached)

        result = self._run(text)

        if self.cache_size > 0:
            self._cache[key] = copy.deepcopy(result)
            while len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)

        return result

    def clear_cache(self) -> None:
        self._cache.clear()

    def _run(self, text: str) -> ExtractionResult:
        start_time = time.time()
        result = ExtractionResult()

        if not text.strip():
            result.warnings.append("Input text is empty")
            return result

        if len(text) > self.max_text_length:
            result.warnings.append(
                f"Input truncated to {self.max_text_length} characters (was {len(text)})"
            )
            text = text[: self.max_text_length]

        result.contact = self.contact_parser.parse(text)
        result.sections = self.section_parser.parse(text)

        date_ranges = self.date_parser.parse(text)
        result.experience = self.aggregator.aggregate(date_ranges, text)

        result.work_entries = self.experience_parser.parse(text)
        result.job_titles = self.job_title_parser.parse(text)

        if result.contact.is_empty:
            result.warnings.append("No contact information detected")
        if set(result.sections) <= {HEADER_SECTION}:
            result.warnings.append("Could not detect standard resume sections")
        if not result.work_entries:
            result.warnings.append("No work experience entries detected")

        result.processing_time_ms = int((time.time() - start_time) * 1000)
        logger.debug(
            f"Extracted {len(result.sections)} sections, {len(result.work_entries)} entries, "
            f"{result.experience.total_months} months in {result.processing_time_ms} ms"
        )
        return result


# Singleton instance
_resume_extractor: Optional[ResumeExtractor] = None


def get_resume_extractor() -> ResumeExtractor:
    """Get the resume extractor singleton instance."""
    global _resume_extractor
    if _resume_extractor is None:
        _resume_extractor = ResumeExtractor()
    return _resume_extractor


def extract(text: Optional[str]) -> ExtractionResult:
    """Extract structured facts using the shared extractor."""
    return get_resume_extractor().extract(text)
