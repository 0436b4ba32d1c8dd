"""
Shared test fixtures for the resume-intel test suite.

Sets environment variables before any resume_intel imports so settings
resolve predictably, then provides a frozen clock and sample resume text.
"""

import os

# === Set environment BEFORE any resume_intel imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import date

import pytest

from resume_intel.nlp import ResumeExtractor
from resume_intel.nlp.parsers import CalendarMonth, DateRange


SAMPLE_RESUME = """Jane Doe
jane.doe@example.com | (512) 555-0199
linkedin.com/in/janedoe
Austin, TX

SUMMARY
Backend engineer focused on reliable data systems.

EXPERIENCE
Senior Software Engineer
Acme Corp
Jan 2021 - Present
Austin, TX
• Led a team of 5 engineers
• Cut infrastructure costs by 30%
Software Developer
Globex Inc
Mar 2018 - Jun 2021
Remote
• Built internal tools for support staff

EDUCATION
B.S. Computer Science
University of Texas, 2017
"""


@pytest.fixture
def frozen_today():
    """The date every open-ended range ends in during tests."""
    return date(2024, 6, 15)


@pytest.fixture
def sample_resume_text():
    return SAMPLE_RESUME


@pytest.fixture
def extractor(frozen_today):
    """ResumeExtractor with a frozen clock and caching disabled."""
    return ResumeExtractor(today=frozen_today, cache_size=0)


@pytest.fixture
def make_range():
    """Factory building DateRange objects from 1-based (year, month) pairs."""

    def _factory(start: tuple[int, int], end: tuple[int, int], raw_text: str = "") -> DateRange:
        return DateRange(
            start=CalendarMonth(start[0], start[1] - 1),
            end=CalendarMonth(end[0], end[1] - 1),
            raw_text=raw_text,
        )

    return _factory
