"""Splits converted section text into paragraphs and drops noise."""

import re
from typing import List, Optional

from mdna_outlook.config.patterns import COMPILED_PATTERNS
from mdna_outlook.config.settings import (
    BOILERPLATE_MAX_LENGTH,
    MAX_PARAGRAPHS,
    MIN_PARAGRAPH_LENGTH,
)
from mdna_outlook.models.filing import Paragraph
from mdna_outlook.parsers.table_detector import TableDetector


class ParagraphFilter:
    """Keeps the first meaningful paragraphs of a section."""

    def __init__(self, table_detector: Optional[TableDetector] = None):
        self.patterns = COMPILED_PATTERNS
        self.table_detector = table_detector or TableDetector()
        self.paragraph_break = re.compile(r'\n\n+')

    def split_paragraphs(self, text: str) -> List[Paragraph]:
        """
        Split text on blank lines and classify every paragraph.

        Args:
            text: Plain text produced from a section's markup

        Returns:
            Paragraphs in document order, rejected ones included
        """
        paragraphs = []
        for block in self.paragraph_break.split(text):
            block = block.strip()
            paragraphs.append(Paragraph(text=block, rejection_reason=self.rejection_reason(block)))
        return paragraphs

    def select(self, text: str) -> str:
        """Join the first MAX_PARAGRAPHS valid paragraphs with blank lines."""
        valid = [p.text for p in self.split_paragraphs(text) if p.is_valid]
        return '\n\n'.join(valid[:MAX_PARAGRAPHS])

    def rejection_reason(self, paragraph: str) -> Optional[str]:
        """Why a paragraph is noise, or None when it should be kept."""
        if len(paragraph) < MIN_PARAGRAPH_LENGTH:
            return "too_short"

        for pattern in self.patterns["noise_paragraph"]:
            if pattern.match(paragraph):
                return "navigation"

        if self.patterns["pure_number"].fullmatch(paragraph):
            return "numeric"

        # Only short boilerplate is dropped; longer passages carry substance
        if len(paragraph) < BOILERPLATE_MAX_LENGTH:
            for pattern in self.patterns["boilerplate"]:
                if pattern.match(paragraph):
                    return "boilerplate"

        if self.table_detector.is_table_content(paragraph):
            return "table"

        return None

    def is_valid_paragraph(self, paragraph: str) -> bool:
        return self.rejection_reason(paragraph) is None
