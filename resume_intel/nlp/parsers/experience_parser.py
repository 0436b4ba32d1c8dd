"""
Work experience entry builder for resumes.

Scans lines with a small state machine and assembles employment entries
(title, company, duration, location, description bullets).
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from resume_intel.utils.logger import get_logger

from .line_classifier import LineClassifier
from .location_parser import LocationParser

logger = get_logger(__name__)


@dataclass
class WorkExperienceEntry:
    """A work experience entry assembled from consecutive lines."""

    title: str
    company: str = ""
    duration: str = ""
    location: str = ""
    description_bullets: list[str] = field(default_factory=list)


class BuilderState(str, Enum):
    """Scan state of the entry builder."""

    IDLE = "idle"
    COLLECTING_ENTRY = "collecting_entry"


class ExperienceParser:
    """
    Builder for work experience entries.

    Lines are walked with an explicit cursor. A title line met while an
    entry is being collected closes that entry and switches back to IDLE
    without advancing the cursor, so the same line is read again and opens
    the next entry. Bullet markers do not matter: "• Lead Developer" opens
    an entry like any other title line.
    """

    YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")

    MAX_COMPANY_LENGTH = 100
    MAX_LOCATION_LENGTH = 50
    MIN_BULLET_LENGTH = 10

    def __init__(
        self,
        classifier: Optional[LineClassifier] = None,
        location_parser: Optional[LocationParser] = None,
    ):
        self.location_parser = location_parser or LocationParser()
        self.classifier = classifier or LineClassifier(location_parser=self.location_parser)

    def parse(self, text: str) -> list[WorkExperienceEntry]:
        """
        Build work experience entries from resume text.

        Args:
            text: Full resume text

        Returns:
            Entries in document order; missing fields are left empty
        """
        if not text:
            return []

        lines = [line.strip() for line in text.split("\n") if line.strip()]
        entries: list[WorkExperienceEntry] = []

        state = BuilderState.IDLE
        current: Optional[WorkExperienceEntry] = None
        cursor = 0

        while cursor < len(lines):
            line = lines[cursor]
            is_title = self.classifier.is_job_title_candidate(line)

            if state is BuilderState.COLLECTING_ENTRY and is_title:
                # Backtrack: close the open entry, re-read this line while idle
                entries.append(current)
                current = None
                state = BuilderState.IDLE
                continue

            if state is BuilderState.IDLE:
                if is_title:
                    current = WorkExperienceEntry(title=line)
                    state = BuilderState.COLLECTING_ENTRY
                    cursor = self._consume_header(lines, cursor + 1, current)
                else:
                    cursor += 1
                continue

            self._collect(line, current)
            cursor += 1

        if current is not None:
            entries.append(current)

        logger.debug(f"Built {len(entries)} work experience entries")
        return entries

    def _consume_header(
        self, lines: list[str], cursor: int, entry: WorkExperienceEntry
    ) -> int:
        """
        Take the company and duration lines that follow a title.

        Returns:
            Cursor position after the consumed lines
        """
        if cursor < len(lines):
            company = lines[cursor]
            if not self.YEAR_PATTERN.search(company) and len(company) < self.MAX_COMPANY_LENGTH:
                entry.company = company
                cursor += 1

                if cursor < len(lines) and self.YEAR_PATTERN.search(lines[cursor]):
                    entry.duration = lines[cursor]
                    cursor += 1

        return cursor

    def _collect(self, line: str, entry: WorkExperienceEntry) -> None:
        """
        Attach a non-title line to the open entry as duration, location or bullet.

        A short line without a year is spent on the location slot while that
        slot is empty, whether or not a location is recognised in it.
        """
        has_year = bool(self.YEAR_PATTERN.search(line))

        if has_year and not entry.duration:
            entry.duration = line
            return

        if (
            not entry.location
            and not has_year
            and len(line) < self.MAX_LOCATION_LENGTH
        ):
            locations = self.location_parser.parse(line)
            if locations:
                entry.location = locations[0]
            return

        if len(line) > self.MIN_BULLET_LENGTH:
            entry.description_bullets.append(line)
