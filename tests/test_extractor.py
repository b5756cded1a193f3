import re

import pytest

from mdna_outlook.config.settings import (
    HEADING_SECTION_CAP,
    INSUFFICIENT_CONTENT_MESSAGE,
    MAX_EXCERPT_LENGTH,
    NOT_FOUND_MESSAGE,
    PARSE_ERROR_MESSAGE,
)
from mdna_outlook.core.extractor import OutlookExtractor, extract
from mdna_outlook.models.filing import Confidence, ExtractionResult, FailureKind
from mdna_outlook.utils.logger import setup_logging


class TestOutlookExtractor:
    """Test suite for OutlookExtractor confidence stages and output shape."""

    @pytest.fixture(autouse=True)
    def init_logging(self, tmp_path):
        setup_logging(verbose=False, log_dir=tmp_path / "logs")

    @pytest.fixture
    def extractor(self):
        return OutlookExtractor()

    def test_outlook_heading_gives_high_confidence(self, extractor, outlook_html):
        result = extractor.extract(outlook_html)

        assert isinstance(result, ExtractionResult)
        assert result.confidence == Confidence.HIGH
        assert result.confidence == "high"
        assert result.failure is None
        assert result.pattern_name == "outlook_heading"
        assert "We expect revenue to grow 10% next year" in result.excerpt
        assert "Management anticipates operating margins" in result.excerpt

    def test_excerpt_stops_at_next_heading(self, extractor, outlook_html):
        result = extractor.extract(outlook_html)

        assert "Item 3" not in result.excerpt
        assert "Market risk" not in result.excerpt

    def test_paragraphs_separated_by_blank_line(self, extractor, outlook_html):
        result = extractor.extract(outlook_html)

        assert "customers.\n\nManagement anticipates" in result.excerpt

    def test_script_and_style_content_removed(self, extractor, outlook_html):
        result = extractor.extract(outlook_html)

        assert "var section" not in result.excerpt
        assert "font-weight" not in result.excerpt

    def test_mdna_only_gives_medium_confidence(self, extractor, mdna_only_html):
        result = extractor.extract(mdna_only_html)

        assert result.confidence == Confidence.MEDIUM
        assert result.pattern_name == "item_2_mdna"
        assert "Revenue increased during the quarter" in result.excerpt

    def test_no_section_gives_not_found_message(self, extractor):
        result = extractor.extract("<html></html>")

        assert result.to_dict() == {"excerpt": NOT_FOUND_MESSAGE, "confidence": "low"}
        assert result.failure == FailureKind.NO_SECTION_FOUND
        assert not result.success

    def test_plain_prose_without_markers_not_found(self, extractor):
        html = "<html><body><p>" + "Quarterly results were in line with plans. " * 10 + "</p></body></html>"
        result = extractor.extract(html)

        assert result.confidence == Confidence.LOW
        assert result.excerpt == NOT_FOUND_MESSAGE

    def test_short_section_downgraded_to_low(self, extractor):
        result = extractor.extract("<html><body><h3>Outlook</h3><p>Stable.</p></body></html>")

        assert result.confidence == Confidence.LOW
        assert result.excerpt == INSUFFICIENT_CONTENT_MESSAGE
        assert result.failure == FailureKind.INSUFFICIENT_CONTENT
        assert result.pattern_name == "outlook_heading"

    def test_parse_failure_is_captured(self, extractor):
        result = extractor.extract(None)

        assert result.excerpt == PARSE_ERROR_MESSAGE
        assert result.confidence == Confidence.LOW
        assert result.failure == FailureKind.PARSE_FAILURE
        assert "TypeError" in result.error

    def test_internal_error_never_propagates(self, extractor, outlook_html, monkeypatch):
        def explode(section):
            raise RuntimeError("unexpected structure")

        monkeypatch.setattr(extractor, "_extract_meaningful_content", explode)
        result = extractor.extract(outlook_html)

        assert result.failure == FailureKind.PARSE_FAILURE
        assert result.excerpt == PARSE_ERROR_MESSAGE
        assert "unexpected structure" in result.error

    def test_excerpt_bounded_and_ends_at_sentence(self, extractor, long_outlook_html):
        result = extractor.extract(long_outlook_html)

        assert result.confidence == Confidence.HIGH
        assert len(result.excerpt) <= MAX_EXCERPT_LENGTH
        assert result.excerpt.endswith("serve.")

    def test_excerpt_is_markup_free(self, extractor):
        html = (
            "<html><body><h3><b>Outlook</b></h3>"
            "<p><span style=\"color:#000\">We&nbsp;expect</span> growth in our Digital Media "
            "segment &amp; continued margin expansion&#8217;s benefits over the coming year.</p>"
            "<p>Customer demand for the Creative Cloud&#x2122; suite remains healthy&mdash;"
            "particularly among enterprise buyers.</p></body></html>"
        )
        result = extractor.extract(html)

        assert result.confidence == Confidence.HIGH
        assert "<" not in result.excerpt
        assert re.search(r"&#?\w+;", result.excerpt) is None
        assert "We expect growth" in result.excerpt
        assert "segment & continued" in result.excerpt

    def test_region_cap_inside_tag_leaves_no_markup(self, extractor):
        span = '<span style="font-family:Times New Roman;font-size:10pt">growth </span>'
        html = "<h3>Outlook</h3><div>We expect steady " + span * 400 + "</div>"
        cut = html[:HEADING_SECTION_CAP]

        assert cut.rfind("<") > cut.rfind(">")

        result = extractor.extract(html)

        assert result.confidence == Confidence.HIGH
        assert "<" not in result.excerpt
        assert result.excerpt.endswith("growth")

    def test_table_rows_rejected(self, extractor):
        html = (
            "<html><body><h3>Business Outlook</h3>"
            "<p>Revenue $1,234 $5,678 Cost of revenue $987 $1,045 Gross profit $247 $4,633</p>"
            "<p>We anticipate continued strength in recurring revenue as customers migrate "
            "to our cloud subscription plans during the second half.</p>"
            "</body></html>"
        )
        result = extractor.extract(html)

        assert result.confidence == Confidence.HIGH
        assert "$1,234" not in result.excerpt
        assert "We anticipate continued strength" in result.excerpt

    def test_short_safe_harbor_dropped_long_kept(self, extractor):
        short = "Safe Harbor Statement: this report contains forward-looking statements."
        long = (
            "Safe Harbor considerations aside, we believe demand for our document cloud "
            "products will accelerate next year as businesses digitize paper workflows, "
            "and we plan to increase investment in sales and marketing to capture that "
            "demand while keeping operating expenses disciplined across all regions."
        )
        html = (
            "<html><body><h3>Outlook</h3>"
            "<p>Our view of the coming fiscal year is summarized below for investors.</p>"
            f"<p>{short}</p><p>{long}</p>"
            "</body></html>"
        )
        result = extractor.extract(html)

        assert len(long) >= 250
        assert "Safe Harbor Statement" not in result.excerpt
        assert "Safe Harbor considerations aside" in result.excerpt

    def test_only_first_five_paragraphs_used(self, extractor):
        paragraphs = "".join(
            f"<p>Paragraph number {word} describes expected conditions for the business next year.</p>"
            for word in ["one", "two", "three", "four", "five", "six", "seven"]
        )
        result = extractor.extract(f"<html><body><h3>Outlook</h3>{paragraphs}</body></html>")

        assert "Paragraph number five" in result.excerpt
        assert "Paragraph number six" not in result.excerpt
        assert result.excerpt.count("\n\n") == 4

    def test_extraction_is_deterministic(self, extractor, outlook_html):
        assert extractor.extract(outlook_html) == extractor.extract(outlook_html)
        assert extract(outlook_html) == extract(outlook_html)

    def test_module_extract_matches_class(self, extractor, outlook_html):
        assert extract(outlook_html).to_dict() == extractor.extract(outlook_html).to_dict()

    def test_to_dict_has_exactly_two_fields(self, extractor, outlook_html):
        assert set(extractor.extract(outlook_html).to_dict()) == {"excerpt", "confidence"}
