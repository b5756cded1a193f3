"""Locates the outlook or MD&A region inside normalized filing HTML."""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from mdna_outlook.config.patterns import COMPILED_PATTERNS
from mdna_outlook.config.settings import (
    HEADING_SECTION_CAP,
    MDNA_SECTION_CAP,
    NEXT_HEADING_MIN_OFFSET,
)
from mdna_outlook.models.filing import CandidateSection, Confidence
from mdna_outlook.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SectionMatcher:
    """A named pattern that reports its first hit as (position, matched length)."""
    name: str
    pattern: re.Pattern

    def __call__(self, text: str) -> Optional[Tuple[int, int]]:
        match = self.pattern.search(text)
        if match is None:
            return None
        return match.start(), match.end() - match.start()


def build_matchers(pattern_key: str) -> List[SectionMatcher]:
    """Wrap an ordered (name, pattern) list from COMPILED_PATTERNS in matchers."""
    return [SectionMatcher(name, pattern) for name, pattern in COMPILED_PATTERNS[pattern_key]]


class SectionLocator:
    """Finds the candidate section with a heading search and an MD&A fallback."""

    def __init__(self):
        self.heading_matchers = build_matchers("outlook_heading")
        self.mdna_matchers = build_matchers("mdna_start")
        self.next_heading_patterns = COMPILED_PATTERNS["next_heading"]

    def locate(self, html: str) -> Optional[CandidateSection]:
        """
        Find the region most likely to contain forward-looking commentary.

        Args:
            html: Normalized filing HTML

        Returns:
            CandidateSection, or None when neither search stage matched
        """
        section = self.find_outlook_section(html)
        if section is None:
            section = self.find_mdna_section(html)
        return section

    def find_outlook_section(self, html: str) -> Optional[CandidateSection]:
        """Stage 1: explicit outlook heading, bounded by the next heading."""
        hit = self._first_hit(self.heading_matchers, html)
        if hit is None:
            return None

        name, start = hit
        from_heading = html[start:]
        end = min(self._find_next_heading(from_heading), HEADING_SECTION_CAP)

        logger.debug(f"Outlook heading '{name}' at position {start}, section length {end}")
        return CandidateSection(
            start=start,
            text=from_heading[:end],
            confidence=Confidence.HIGH,
            pattern_name=name,
        )

    def find_mdna_section(self, html: str) -> Optional[CandidateSection]:
        """Stage 2: generic MD&A start, hard capped."""
        hit = self._first_hit(self.mdna_matchers, html)
        if hit is None:
            return None

        name, start = hit
        logger.debug(f"MD&A pattern '{name}' at position {start}")
        return CandidateSection(
            start=start,
            text=html[start:start + MDNA_SECTION_CAP],
            confidence=Confidence.MEDIUM,
            pattern_name=name,
        )

    def _first_hit(self, matchers: List[SectionMatcher], html: str) -> Optional[Tuple[str, int]]:
        """First matcher in list order that hits wins; later matchers are not tried."""
        for matcher in matchers:
            hit = matcher(html)
            if hit is not None:
                position, _ = hit
                return matcher.name, position
        return None

    def _find_next_heading(self, text: str) -> int:
        """
        Find where the section ends.

        Args:
            text: Document text starting at the matched heading

        Returns:
            Offset of the nearest heading-like marker beyond the minimum
            offset, or the length of the text when there is none
        """
        end_candidates = []
        for pattern in self.next_heading_patterns:
            # Only each marker's first hit counts; the heading itself usually matches at 0
            match = pattern.search(text)
            if match and match.start() > NEXT_HEADING_MIN_OFFSET:
                end_candidates.append(match.start())

        return min(end_candidates) if end_candidates else len(text)
