"""Configuration settings for the MD&A Outlook Extractor."""

import os
from pathlib import Path

# Base directories
# Resolve project root two levels up from this file
BASE_DIR = Path(__file__).resolve().parent.parent.parent

LOG_DIR = Path(os.environ.get("MDNA_OUTLOOK_LOG_DIR", BASE_DIR / "logs"))

# Excerpt limits
MAX_EXCERPT_LENGTH = 2500
ELLIPSIS = "..."
SENTENCE_BREAK_RATIO = 0.7  # Sentence cut must land at or after 70% of the limit

# Candidate section caps
HEADING_SECTION_CAP = 15000
MDNA_SECTION_CAP = 25000
NEXT_HEADING_MIN_OFFSET = 200  # Skip end markers this close to the section start

# Paragraph filtering
MIN_PARAGRAPH_LENGTH = 50
MIN_CONTENT_LENGTH = 100
BOILERPLATE_MAX_LENGTH = 200  # Boilerplate openers only drop paragraphs shorter than this
MAX_PARAGRAPHS = 5
NUMBER_TOKEN_RATIO = 0.3

# Placeholder excerpts
NOT_FOUND_MESSAGE = "MD&A or Outlook section not found in this filing."
INSUFFICIENT_CONTENT_MESSAGE = "Unable to extract meaningful outlook content from filing."
PARSE_ERROR_MESSAGE = "Error parsing filing HTML content."

# EDGAR endpoints
EDGAR_USER_AGENT = os.environ.get("EDGAR_USER_AGENT", "").strip()
SUBMISSIONS_URL = "https://data.sec.gov/submissions/CIK{cik}.json"
ARCHIVES_URL = "https://www.sec.gov/Archives/edgar/data/{cik}/{accession}/{document}"
DEFAULT_CIK = "0000796343"  # Adobe Inc.
DEFAULT_FORM = "10-Q"

# HTTP behaviour
REQUEST_TIMEOUT = 30
MAX_RETRIES = 1
SUBMISSIONS_RATE_LIMIT_DELAY = 2.0
SUBMISSIONS_ERROR_DELAY = 1.0
DOCUMENT_RATE_LIMIT_DELAY = 3.0
DOCUMENT_ERROR_DELAY = 1.5

# File reading
ENCODING_PREFERENCES = ["utf-8"]
FALLBACK_ENCODING = "latin-1"
MAX_FILE_SIZE_MB = 250

# Logging
LOG_FILENAME = "mdna_outlook_errors.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
