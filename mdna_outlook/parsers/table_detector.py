"""Detects paragraphs that are table rows or numeric layout artifacts."""

from typing import Optional

from mdna_outlook.config.patterns import COMPILED_PATTERNS
from mdna_outlook.config.settings import NUMBER_TOKEN_RATIO


class TableDetector:
    """Classifies converted paragraphs as table content."""

    def __init__(self):
        self.indicator_patterns = COMPILED_PATTERNS["table_indicator"]
        self.number_token_pattern = COMPILED_PATTERNS["number_token"]

    def is_table_content(self, text: str) -> bool:
        """
        Check whether a paragraph is primarily table data.

        Args:
            text: Paragraph text

        Returns:
            True if any table indicator matches or the paragraph is number heavy
        """
        return self.matching_indicator(text) is not None or self.is_number_heavy(text)

    def matching_indicator(self, text: str) -> Optional[str]:
        """Return the first table indicator pattern found in the text."""
        for pattern in self.indicator_patterns:
            if pattern.search(text):
                return pattern.pattern
        return None

    def is_number_heavy(self, text: str) -> bool:
        """More than NUMBER_TOKEN_RATIO of whitespace tokens are currency numbers."""
        words = text.split()
        if not words:
            return False

        number_count = sum(1 for word in words if self.number_token_pattern.fullmatch(word))
        return number_count > len(words) * NUMBER_TOKEN_RATIO
