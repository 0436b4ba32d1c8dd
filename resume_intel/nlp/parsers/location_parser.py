"""
Location recognizer for resume lines.

Decides whether a short line names a place or a remote-work arrangement.
Lines are screened against technology, education and role vocabulary
before any pattern is tried: those words share capitalisation with place
names often enough that matching first produces mostly noise.
"""

import re

from resume_intel.utils.constants import (
    COUNTRY_NAMES,
    EDUCATION_TERMS,
    MAJOR_CITIES,
    REMOTE_LABEL,
    ROLE_KEYWORDS,
    TECH_TERMS,
    US_STATE_CODES,
)
from resume_intel.utils.logger import get_logger

logger = get_logger(__name__)


class LocationParser:
    """Recognizer for geographic locations and remote-work indicators."""

    MAX_LINE_LENGTH = 100

    REMOTE_PATTERNS = [
        re.compile(r"\bRemote\b", re.IGNORECASE),
        re.compile(r"\b(?:Work From Home|WFH)\b", re.IGNORECASE),
        re.compile(r"\b(?:Distributed|Virtual)\b", re.IGNORECASE),
    ]

    # City, ST (strict capitalisation)
    CITY_STATE_PATTERN = re.compile(r"\b[A-Z][a-z]{2,15},\s+[A-Z]{2}\b")

    # City, Country
    CITY_COUNTRY_PATTERN = re.compile(
        r"\b[A-Z][a-z]{2,15},\s+(?i:United States|United Kingdom|USA|Canada|UK)\b"
    )

    # 123 Main Street, Austin, TX
    ADDRESS_PATTERN = re.compile(
        r"\b\d+\s+[A-Z][a-z]+\s+"
        r"(?:Street|St|Avenue|Ave|Road|Rd|Drive|Dr|Boulevard|Blvd|Lane|Ln)"
        r",\s*[A-Z][a-z]+,\s*[A-Z]{2}\b",
        re.IGNORECASE,
    )

    _ROLE_TERMS = tuple(keyword.lower() for keyword in ROLE_KEYWORDS)

    def parse(self, line: str) -> list[str]:
        """
        Recognize locations in a single line.

        Args:
            line: One line (or line fragment) of resume text

        Returns:
            Recognized locations in first-seen order, without duplicates
        """
        candidate = line.strip()
        if not candidate or self.is_excluded(candidate):
            return []

        found: list[str] = []
        covered: list[tuple[int, int]] = []

        # Gazetteer
        lowered = candidate.lower()
        for city in MAJOR_CITIES:
            start = lowered.find(city.lower())
            if start != -1:
                found.append(city)
                covered.append((start, start + len(city)))

        # Remote indicators
        if any(pattern.search(candidate) for pattern in self.REMOTE_PATTERNS):
            found.append(REMOTE_LABEL)

        # Generic patterns; a city match inside a gazetteer hit is the same place
        for pattern in (self.CITY_STATE_PATTERN, self.CITY_COUNTRY_PATTERN):
            for match in pattern.finditer(candidate):
                if any(match.start() < end and start < match.end() for start, end in covered):
                    continue
                if self._has_valid_region(match.group(0)):
                    found.append(match.group(0))

        for match in self.ADDRESS_PATTERN.finditer(candidate):
            if self._has_valid_region(match.group(0)):
                found.append(match.group(0))

        return list(dict.fromkeys(found))

    def is_excluded(self, line: str) -> bool:
        """Check whether a line is ruled out before any matching."""
        if len(line) > self.MAX_LINE_LENGTH:
            return True

        lowered = line.lower()
        if any(term in lowered for term in TECH_TERMS):
            return True
        if any(term in lowered for term in EDUCATION_TERMS):
            return True
        if any(term in lowered for term in self._ROLE_TERMS):
            return True

        return False

    @staticmethod
    def _has_valid_region(text: str) -> bool:
        """Validate the token after the last comma as a state code or country."""
        region = text.rsplit(",", 1)[-1].strip().upper()
        if len(region) == 2 and region in US_STATE_CODES:
            return True
        return region in COUNTRY_NAMES
