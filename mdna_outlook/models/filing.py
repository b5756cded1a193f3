"""Data models for filing sources and outlook extraction results."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Any


class Confidence(str, Enum):
    """How reliable an excerpt is, based on which search stage matched."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FailureKind(str, Enum):
    """Why an extraction fell back to a placeholder excerpt."""
    NO_SECTION_FOUND = "no_section_found"
    INSUFFICIENT_CONTENT = "insufficient_content"
    PARSE_FAILURE = "parse_failure"


@dataclass
class CandidateSection:
    """Region of the normalized document believed to hold the outlook."""
    start: int
    text: str
    confidence: Confidence
    pattern_name: str

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass
class Paragraph:
    """A blank-line separated block of converted text."""
    text: str
    rejection_reason: Optional[str] = None  # e.g. 'too_short', 'boilerplate', 'table'

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def is_valid(self) -> bool:
        return self.rejection_reason is None


@dataclass
class ExtractionResult:
    """Outcome of a single outlook extraction."""
    excerpt: str
    confidence: Confidence
    failure: Optional[FailureKind] = None
    error: Optional[str] = None  # exception text for parse failures
    pattern_name: Optional[str] = None

    @property
    def success(self) -> bool:
        """Check if an excerpt was extracted from the filing."""
        return self.failure is None

    def to_dict(self) -> Dict[str, str]:
        """Public shape of the result: excerpt and confidence only."""
        return {
            "excerpt": self.excerpt,
            "confidence": self.confidence.value,
        }


@dataclass
class FilingSource:
    """Provenance of the filing an excerpt was taken from."""
    cik: str
    form: str
    filed_at: str
    accession_number: str
    url: str

    def __post_init__(self):
        # Ensure CIK is 10 digits
        self.cik = str(self.cik).zfill(10)

    def to_dict(self) -> Dict[str, str]:
        return {
            "cik": self.cik,
            "form": self.form,
            "filedAt": self.filed_at,
            "url": self.url,
        }


@dataclass
class OutlookReport:
    """Extraction result wrapped with its filing provenance."""
    source: FilingSource
    result: ExtractionResult

    def to_dict(self) -> Dict[str, Any]:
        report = {"source": self.source.to_dict()}
        report.update(self.result.to_dict())
        return report
