"""
Section segmenter for resume text.

Walks the text top to bottom and groups lines under the most recent
section heading.
"""

import re
from dataclasses import dataclass
from typing import Optional

from resume_intel.utils.constants import HEADER_SECTION
from resume_intel.utils.logger import get_logger

from .line_classifier import LineClassifier

logger = get_logger(__name__)


_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_heading(line: str) -> str:
    """Lowercase a heading and replace every non-alphanumeric character with "_"."""
    return _NON_ALNUM.sub("_", line.strip().lower())


@dataclass
class Section:
    """A named section of a resume."""

    name: str
    content: str


class SectionParser:
    """Parser for splitting resume text into named sections."""

    def __init__(self, classifier: Optional[LineClassifier] = None):
        self.classifier = classifier or LineClassifier()

    def parse(self, text: str) -> dict[str, str]:
        """
        Split text into sections.

        Args:
            text: Full resume text

        Returns:
            Mapping of normalized section name to content, in document order.
            Lines above the first heading go under "header"; a repeated
            heading overwrites the earlier section.
        """
        return {
            name: section.content
            for name, section in self.parse_sections(text).items()
        }

    def parse_sections(self, text: str) -> dict[str, Section]:
        """Split text into Section objects keyed by normalized name."""
        sections: dict[str, Section] = {}
        if not text:
            return sections

        current = HEADER_SECTION
        buffer: list[str] = []

        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if not line:
                continue

            if self.classifier.is_section_heading(line):
                self._flush(sections, current, buffer)
                current = normalize_heading(line)
                buffer = []
            else:
                buffer.append(line)

        self._flush(sections, current, buffer)

        logger.debug(f"Detected sections: {list(sections)}")
        return sections

    @staticmethod
    def _flush(sections: dict[str, Section], name: str, buffer: list[str]) -> None:
        if buffer:
            sections[name] = Section(name=name, content="\n".join(buffer))
