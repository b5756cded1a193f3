"""Outlook extractor: locates forward-looking MD&A commentary in filing HTML."""

from typing import Optional

from mdna_outlook.config.settings import (
    INSUFFICIENT_CONTENT_MESSAGE,
    MAX_EXCERPT_LENGTH,
    MIN_CONTENT_LENGTH,
    NOT_FOUND_MESSAGE,
    PARSE_ERROR_MESSAGE,
)
from mdna_outlook.models.filing import CandidateSection, Confidence, ExtractionResult, FailureKind
from mdna_outlook.parsers.html_normalizer import HTMLNormalizer
from mdna_outlook.parsers.paragraph_filter import ParagraphFilter
from mdna_outlook.parsers.section_locator import SectionLocator
from mdna_outlook.parsers.text_cleaner import TextCleaner
from mdna_outlook.utils.logger import get_logger

logger = get_logger(__name__)


class OutlookExtractor:
    """Heuristic extractor for the outlook portion of a 10-Q/10-K document."""

    def __init__(self, max_length: int = MAX_EXCERPT_LENGTH):
        self.max_length = max_length

        # Initialize components
        self.normalizer = HTMLNormalizer()
        self.section_locator = SectionLocator()
        self.paragraph_filter = ParagraphFilter()
        self.text_cleaner = TextCleaner()

    def extract(self, raw_html: str) -> ExtractionResult:
        """
        Extract a bounded outlook excerpt from a filing document.

        Never raises: malformed input yields a low-confidence placeholder.

        Args:
            raw_html: Full HTML body of the filing

        Returns:
            ExtractionResult with excerpt and confidence
        """
        try:
            # 1) Normalize markup
            html = self.normalizer.normalize_markup(raw_html)

            # 2) Outlook heading, then MD&A fallback
            section = self.section_locator.locate(html)
            if section is None:
                logger.info("No outlook heading or MD&A section found")
                return ExtractionResult(
                    excerpt=NOT_FOUND_MESSAGE,
                    confidence=Confidence.LOW,
                    failure=FailureKind.NO_SECTION_FOUND,
                )

            # 3) Convert and keep meaningful paragraphs
            content = self._extract_meaningful_content(section)
            if len(content) < MIN_CONTENT_LENGTH:
                logger.info(f"Section '{section.pattern_name}' yielded only {len(content)} characters")
                return ExtractionResult(
                    excerpt=INSUFFICIENT_CONTENT_MESSAGE,
                    confidence=Confidence.LOW,
                    failure=FailureKind.INSUFFICIENT_CONTENT,
                    pattern_name=section.pattern_name,
                )

            # 4) Clean and truncate
            excerpt = self.text_cleaner.clean_and_truncate(content, self.max_length)

            logger.debug(f"Extracted {len(excerpt)} character excerpt ({section.confidence.value})")
            return ExtractionResult(
                excerpt=excerpt,
                confidence=section.confidence,
                pattern_name=section.pattern_name,
            )

        except Exception as e:
            logger.exception(f"HTML parsing error: {e}")
            return ExtractionResult(
                excerpt=PARSE_ERROR_MESSAGE,
                confidence=Confidence.LOW,
                failure=FailureKind.PARSE_FAILURE,
                error=f"{type(e).__name__}: {e}",
            )

    def _extract_meaningful_content(self, section: CandidateSection) -> str:
        """Markup-to-text conversion followed by paragraph selection."""
        text = self.normalizer.markup_to_text(section.text)
        return self.paragraph_filter.select(text)


_default_extractor: Optional[OutlookExtractor] = None


def extract(raw_html: str) -> ExtractionResult:
    """Extract an outlook excerpt with a shared, stateless extractor."""
    global _default_extractor
    if _default_extractor is None:
        _default_extractor = OutlookExtractor()
    return _default_extractor.extract(raw_html)
