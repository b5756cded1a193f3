"""Regex patterns for outlook/MD&A section detection and text cleanup."""

import re

# Markup removed before any search
MARKUP_BLOCK_PATTERNS = [
    r"<script[^>]*>.*?</script>",
    r"<style[^>]*>.*?</style>",
]


# Explicit outlook headings, tried in order (confidence: high)
OUTLOOK_HEADING_PATTERNS = [
    # <h3>Business Outlook</h3>, <b>Outlook and Trends</b>, <font ... bold>Outlook</font>
    ("outlook_heading",
     r"<[^>]*(?:heading|h\d|font[^>]*bold|b\b)[^>]*>\s*(?:business\s*)?outlook(?:\s*and\s*trends)?[^<]*</[^>]*>"),
    ("forward_looking_heading",
     r"<[^>]*(?:heading|h\d|font[^>]*bold|b\b)[^>]*>\s*forward[^<]*looking[^<]*statements?[^<]*</[^>]*>"),
    ("future_expectations_heading",
     r"<[^>]*(?:heading|h\d|font[^>]*bold|b\b)[^>]*>\s*future[^<]*expectations?[^<]*</[^>]*>"),
    # Anchor links and table of contents entries
    ("outlook_anchor",
     r"<a[^>]*>\s*(?:business\s*)?outlook(?:\s*and\s*trends)?[^<]*</a>"),
    # Bare phrase followed by punctuation or a tag
    ("outlook_phrase",
     r"(?:business\s*)?outlook(?:\s*and\s*trends)?(?=\s*[:\-\.]|\s*<)"),
]


# Generic MD&A section starts, tried in order (confidence: medium)
MDNA_START_PATTERNS = [
    ("item_2_mdna",
     r"item\s*2[^a-z]*management[^<]{0,100}discussion[^<]{0,100}analysis"),
    ("mdna_financial_condition",
     r"management[^<]{0,100}discussion[^<]{0,100}analysis[^<]{0,100}financial[^<]{0,100}condition"),
    ("mdna_heading",
     r"<[^>]*(?:heading|h\d)[^>]*>[^<]*(?:management|md&a)[^<]*discussion[^<]*</[^>]*>"),
]


# Markers that close an outlook section
NEXT_HEADING_PATTERNS = [
    r"<[^>]*(?:heading|h\d)[^>]*>[^<]+</[^>]*>",
    r"<[^>]*font[^>]*bold[^>]*>[^<]{10,100}</[^>]*>",
    r"(?:item\s*\d+|part\s*[iv]+)",
]


# Markup-to-text conversion, applied in order
MARKUP_TO_TEXT_RULES = [
    (r"<[^>]*$", ""),  # Tag cut open by a region cap
    (r"<br[^>]*>", "\n"),
    (r"</p>", "\n\n"),
    (r"<p[^>]*>", ""),
    (r"</div>", "\n"),
    (r"<[^>]*>", " "),
]

ENTITY_REPLACEMENTS = [
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
]

RESIDUAL_ENTITY_PATTERNS = [
    r"&#[xX]?[0-9a-fA-F]+;",
    r"&[a-zA-Z]+;",
]


# Paragraphs that are never content
NOISE_PARAGRAPH_PATTERNS = [
    r"page\s*\d+",
    r"table\s*of\s*contents",
]

PURE_NUMBER_PATTERN = r"\d+\s*"

# Short boilerplate openers, only dropped below BOILERPLATE_MAX_LENGTH
BOILERPLATE_PATTERNS = [
    r"this\s*form\s*10-?q",
    r"forward[^.]*looking[^.]*statements[^.]*disclaimer",
    r"safe\s*harbor",
    r"the\s*following\s*discussion",
]


# Table content indicators
TABLE_INDICATOR_PATTERNS = [
    r"^\$.*\$.*\$",                                   # Lines with multiple dollar signs
    r"^\d+\s+\d+\s+\d+",                              # Lines starting with multiple numbers
    r"\t.*\t.*\t",                                    # Multiple tabs
    r"\b\d{1,3},\d{3}\b.*\b\d{1,3},\d{3}\b",          # Multiple formatted numbers
    r"^\s*\d+\.\d+\s+\d+\.\d+",                       # Multiple decimal numbers
    r"^\s*[\(\$]?\d{1,3}(?:,\d{3})*[\)\$]?\s+[\(\$]?\d{1,3}(?:,\d{3})*[\)\$]?",  # Financial rows
    r"^[\s\d\$\(\),.-]+$",                            # Only numbers, symbols and whitespace
    r"(?i:\b(?:in\s+thousands|in\s+millions)\b)",      # Unit headers
    r"^\s*[A-Z\s]{5,50}\s*\d{1,3}(?:,\d{3})*\s*\d{1,3}(?:,\d{3})*",  # Caps label followed by numbers
]

NUMBER_TOKEN_PATTERN = r"\$?\d{1,3}(?:,\d{3})*\.?\d*\$?"


# Final cleanup
LEADING_NUMBERING_PATTERN = r"\A\s*[\d\.\)\-\s]*"

REFERENCE_REMOVAL_PATTERNS = [
    r"(?i:\b(?:page|p\.)\s*\d+\b)",                                              # page 12, p. 12
    r"(?i:\b(?:see|refer to)\s+(?:page|item|section|part)\s+[\w\-\.]+\b)",       # see Item 1A
    r"(?i:\b(?:table|exhibit))\s+(?:\d[\w\-\.]*|[A-Z](?:[\d\-\.]*\w)?)\b",       # Table 3, Exhibit A
    r"\([^)]{1,3}\)",                                                            # (1), (a)
]


def compile_patterns():
    """Compile all regex patterns for better performance."""
    compiled = {
        "markup_blocks": [re.compile(p, re.IGNORECASE | re.DOTALL) for p in MARKUP_BLOCK_PATTERNS],
        "outlook_heading": [(name, re.compile(p, re.IGNORECASE)) for name, p in OUTLOOK_HEADING_PATTERNS],
        "mdna_start": [(name, re.compile(p, re.IGNORECASE)) for name, p in MDNA_START_PATTERNS],
        "next_heading": [re.compile(p, re.IGNORECASE) for p in NEXT_HEADING_PATTERNS],
        "markup_to_text": [(re.compile(p, re.IGNORECASE), repl) for p, repl in MARKUP_TO_TEXT_RULES],
        "residual_entity": [re.compile(p) for p in RESIDUAL_ENTITY_PATTERNS],
        "noise_paragraph": [re.compile(p, re.IGNORECASE) for p in NOISE_PARAGRAPH_PATTERNS],
        "pure_number": re.compile(PURE_NUMBER_PATTERN),
        "boilerplate": [re.compile(p, re.IGNORECASE) for p in BOILERPLATE_PATTERNS],
        "table_indicator": [re.compile(p, re.MULTILINE) for p in TABLE_INDICATOR_PATTERNS],
        "number_token": re.compile(NUMBER_TOKEN_PATTERN),
        "leading_numbering": re.compile(LEADING_NUMBERING_PATTERN),
        "reference_removal": [re.compile(p) for p in REFERENCE_REMOVAL_PATTERNS],
    }
    return compiled

COMPILED_PATTERNS = compile_patterns()
