"""Markup normalization for filing HTML documents."""

import re

from mdna_outlook.config.patterns import COMPILED_PATTERNS, ENTITY_REPLACEMENTS


class HTMLNormalizer:
    """Turns filing markup into searchable HTML and, later, into plain text."""

    def __init__(self):
        self.patterns = COMPILED_PATTERNS
        self.whitespace_pattern = re.compile(r'\s+')
        self.excess_newline_pattern = re.compile(r'\n\s*\n\s*\n')
        self.repeated_space_pattern = re.compile(r' +')

    def normalize_markup(self, html: str) -> str:
        """
        Remove script/style blocks and collapse whitespace.

        Args:
            html: Raw filing HTML

        Returns:
            Single-line HTML suitable for heading searches
        """
        for pattern in self.patterns["markup_blocks"]:
            html = pattern.sub('', html)

        return self.whitespace_pattern.sub(' ', html).strip()

    def markup_to_text(self, html_section: str) -> str:
        """
        Convert an HTML region to plain text, keeping paragraph breaks.

        Args:
            html_section: Slice of normalized HTML

        Returns:
            Plain text with paragraphs separated by blank lines
        """
        text = html_section
        for pattern, replacement in self.patterns["markup_to_text"]:
            text = pattern.sub(replacement, text)

        text = self._decode_entities(text)

        text = self.excess_newline_pattern.sub('\n\n', text)
        text = self.repeated_space_pattern.sub(' ', text)

        return text.strip()

    def _decode_entities(self, text: str) -> str:
        """Decode the common entities and blank out everything else."""
        for entity, replacement in ENTITY_REPLACEMENTS:
            text = text.replace(entity, replacement)

        for pattern in self.patterns["residual_entity"]:
            text = pattern.sub(' ', text)

        return text
