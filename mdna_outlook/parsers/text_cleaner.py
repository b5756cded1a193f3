"""Final cleanup and truncation of extracted outlook text."""

import re

from mdna_outlook.config.patterns import COMPILED_PATTERNS
from mdna_outlook.config.settings import ELLIPSIS, MAX_EXCERPT_LENGTH, SENTENCE_BREAK_RATIO


class TextCleaner:
    """Strips reference artifacts and cuts excerpts at a sentence or word boundary."""

    def __init__(self):
        self.patterns = COMPILED_PATTERNS
        self.horizontal_space = re.compile(r'[^\S\n]+')
        self.line_padding = re.compile(r' *\n *')
        self.excess_newlines = re.compile(r'\n{3,}')
        self.sentence_break = re.compile(r'\.\s*\n\s*\n')
        self.trailing_blank_lines = re.compile(r'\s*\n\s*$')

    def clean_and_truncate(self, text: str, max_length: int = MAX_EXCERPT_LENGTH) -> str:
        """
        Clean joined paragraph text and bound it to max_length characters.

        Args:
            text: Selected paragraphs joined by blank lines
            max_length: Maximum excerpt length, ellipsis included

        Returns:
            Cleaned excerpt
        """
        return self.truncate(self.clean(text), max_length)

    def clean(self, text: str) -> str:
        """Normalize spacing and remove page, cross and footnote references."""
        text = self._normalize_whitespace(text)
        text = self.patterns["leading_numbering"].sub('', text, count=1)
        text = self.trailing_blank_lines.sub('', text)

        for pattern in self.patterns["reference_removal"]:
            text = pattern.sub('', text)

        return self._normalize_whitespace(text).strip()

    def truncate(self, text: str, max_length: int = MAX_EXCERPT_LENGTH) -> str:
        """
        Cut text at the last sentence end when it is late enough, else at a word.

        Args:
            text: Cleaned text
            max_length: Maximum excerpt length

        Returns:
            Text no longer than max_length
        """
        if len(text) <= max_length:
            return text

        truncated = text[:max_length]
        last_sentence = max(truncated.rfind('. '), truncated.rfind('.\n'))

        if last_sentence >= max_length * SENTENCE_BREAK_RATIO:
            return truncated[:last_sentence + 1].strip()

        # Leave room for the ellipsis inside the limit
        truncated = text[:max_length - len(ELLIPSIS)]
        last_space = max(truncated.rfind(' '), truncated.rfind('\n'))
        if last_space > 0:
            truncated = truncated[:last_space]

        return truncated.strip() + ELLIPSIS

    def _normalize_whitespace(self, text: str) -> str:
        text = self.horizontal_space.sub(' ', text)
        text = self.line_padding.sub('\n', text)
        text = self.excess_newlines.sub('\n\n', text)
        return self.sentence_break.sub('.\n\n', text)
