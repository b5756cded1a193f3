"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Configure pytest
pytest_plugins = []


OUTLOOK_PARAGRAPHS = [
    "We expect revenue to grow 10% next year driven by strong demand for our "
    "subscription offerings across enterprise and consumer customers.",
    "Management anticipates operating margins to remain stable as we continue to "
    "invest in research and development and expand our sales capacity.",
]


@pytest.fixture
def outlook_html():
    """10-Q style document with an MD&A heading followed by a Business Outlook heading."""
    paragraphs = "".join(f"<p>{p}</p>\n" for p in OUTLOOK_PARAGRAPHS)
    return (
        "<html><head>\n"
        "<style>.heading { font-weight: bold; }</style>\n"
        "<script type=\"text/javascript\">var section = \"Outlook:\";</script>\n"
        "</head><body>\n"
        "<h2>Item 2. Management's Discussion and Analysis of Financial Condition "
        "and Results of Operations</h2>\n"
        "<p>Our fiscal quarter ended in May.</p>\n"
        "<h3>Business Outlook</h3>\n"
        f"{paragraphs}"
        "<h3>Item 3. Quantitative and Qualitative Disclosures About Market Risk</h3>\n"
        "<p>Market risk text that must never be part of the excerpt because it "
        "follows the next heading.</p>\n"
        "</body></html>"
    )


@pytest.fixture
def mdna_only_html():
    """Document with an Item 2 MD&A heading and no outlook heading."""
    return (
        "<html><body>\n"
        "<p>Table of Contents</p>\n"
        "<h2>Item 2. Management's Discussion and Analysis of Financial Condition "
        "and Results of Operations</h2>\n"
        "<p>Revenue increased during the quarter as subscription customers renewed "
        "at higher rates than in the prior year period.</p>\n"
        "<p>Operating expenses rose modestly because we continued to hire engineers "
        "and expand our sales organization.</p>\n"
        "</body></html>"
    )


@pytest.fixture
def long_outlook_html():
    """Outlook section whose prose is far longer than the excerpt limit."""
    sentence = "Demand for our products remains strong across every region we serve. "
    paragraphs = "".join(f"<p>{sentence * 12}</p>" for _ in range(6))
    return f"<html><body><h3>Outlook</h3>{paragraphs}</body></html>"
