"""
Exceptions raised by the filing retrieval side of the outlook extractor.

The extractor itself never raises; these cover configuration problems and
EDGAR transport or data failures.
"""

from typing import Any, Dict, Optional


class OutlookError(Exception):
    """Base exception for outlook retrieval errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class ConfigurationError(OutlookError):
    """Raised when a required setting such as EDGAR_USER_AGENT is missing."""
    pass


class EdgarRequestError(OutlookError):
    """Raised when an EDGAR request fails after its retry."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        details = {"url": url}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class EdgarResponseError(OutlookError):
    """Raised when EDGAR returns data in an unexpected shape."""
    pass


class FilingNotFoundError(OutlookError):
    """Raised when a company has no filing of the requested form."""

    def __init__(self, cik: str, form: str):
        message = f"No {form} filings found for CIK {cik}"
        super().__init__(message, {"cik": cik, "form": form})
        self.cik = cik
        self.form = form
