"""
Contact information parser for resumes.

Extracts emails, phone numbers, LinkedIn handles and locations.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from resume_intel.utils.logger import get_logger

from .location_parser import LocationParser

logger = get_logger(__name__)


@dataclass
class ContactInfo:
    """Contact channels found in a resume."""

    emails: list[str] = field(default_factory=list)
    phones: list[str] = field(default_factory=list)
    professional_handles: list[str] = field(default_factory=list)
    # Set semantics, kept in first-seen order
    locations: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.emails or self.phones or self.professional_handles or self.locations)


class ContactParser:
    """Parser for extracting contact channels from resume text."""

    # Email pattern
    EMAIL_PATTERN = re.compile(
        r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"
    )

    # North American phone: optional +1, optional parentheses, . - or space separators
    PHONE_PATTERN = re.compile(
        r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b"
    )

    # linkedin.com/in/<handle> or <cc>.linkedin.com/<handle>
    LINKEDIN_PATTERN = re.compile(
        r"(?:linkedin\.com/in/[A-Za-z0-9._-]+|\b[a-z]{2}\.linkedin\.com/(?:in/)?[A-Za-z0-9._-]+)",
        re.IGNORECASE,
    )

    def __init__(self, location_parser: Optional[LocationParser] = None):
        self.location_parser = location_parser or LocationParser()

    def parse(self, text: str) -> ContactInfo:
        """
        Parse contact information from resume text.

        Args:
            text: Full resume text

        Returns:
            ContactInfo with every channel found
        """
        if not text:
            return ContactInfo()

        result = ContactInfo(
            emails=self._extract_emails(text),
            phones=self._extract_phones(text),
            professional_handles=self._extract_handles(text),
            locations=self._extract_locations(text),
        )

        logger.debug(
            f"Contact channels: {len(result.emails)} email(s), "
            f"{len(result.phones)} phone(s), {len(result.professional_handles)} handle(s), "
            f"{len(result.locations)} location(s)"
        )
        return result

    def _extract_emails(self, text: str) -> list[str]:
        return self.EMAIL_PATTERN.findall(text)

    def _extract_phones(self, text: str) -> list[str]:
        return [match.strip() for match in self.PHONE_PATTERN.findall(text)]

    def _extract_handles(self, text: str) -> list[str]:
        return self.LINKEDIN_PATTERN.findall(text)

    def _extract_locations(self, text: str) -> list[str]:
        """Union of locations recognized on each line."""
        locations: dict[str, None] = {}
        for line in text.split("\n"):
            for location in self.location_parser.parse(line):
                locations.setdefault(location, None)
        return list(locations)
