"""EDGAR client for locating and downloading the latest periodic filing."""

import time
from typing import Any, Dict, Optional

import requests

from mdna_outlook.config.settings import (
    ARCHIVES_URL,
    DEFAULT_FORM,
    DOCUMENT_ERROR_DELAY,
    DOCUMENT_RATE_LIMIT_DELAY,
    EDGAR_USER_AGENT,
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    SUBMISSIONS_ERROR_DELAY,
    SUBMISSIONS_RATE_LIMIT_DELAY,
    SUBMISSIONS_URL,
)
from mdna_outlook.core.exceptions import (
    ConfigurationError,
    EdgarRequestError,
    EdgarResponseError,
    FilingNotFoundError,
)
from mdna_outlook.models.filing import FilingSource
from mdna_outlook.utils.logger import get_logger

logger = get_logger(__name__)


def format_cik(cik) -> str:
    """Pad a CIK to the 10 digits EDGAR URLs expect."""
    return str(cik).strip().zfill(10)


class EdgarClient:
    """HTTP client for the EDGAR submissions API and filing archives."""

    def __init__(self, user_agent: Optional[str] = None, timeout: int = REQUEST_TIMEOUT):
        self.user_agent = EDGAR_USER_AGENT if user_agent is None else user_agent.strip()
        if not self.user_agent:
            raise ConfigurationError("EDGAR_USER_AGENT environment variable not set")
        self.timeout = timeout

    def get_latest_filing(self, cik, form: str = DEFAULT_FORM) -> FilingSource:
        """
        Find the most recent filing of a form type for a company.

        Args:
            cik: Central Index Key, padded to 10 digits if shorter
            form: Form type, e.g. "10-Q"

        Returns:
            FilingSource for the newest matching filing

        Raises:
            EdgarRequestError: submissions request failed after retry
            EdgarResponseError: submissions JSON lacks the recent filings arrays
            FilingNotFoundError: no filing of the requested form
        """
        formatted_cik = format_cik(cik)
        url = SUBMISSIONS_URL.format(cik=formatted_cik)

        logger.info(f"Fetching submissions for CIK {formatted_cik}, form {form}")
        response = self._get(
            url,
            accept="application/json",
            rate_limit_delay=SUBMISSIONS_RATE_LIMIT_DELAY,
            error_delay=SUBMISSIONS_ERROR_DELAY,
        )

        try:
            data = response.json()
        except ValueError as e:
            raise EdgarResponseError("Submissions response is not valid JSON", {"url": url}) from e

        return self._select_latest(data, formatted_cik, form)

    def fetch_document(self, url: str) -> str:
        """
        Download a filing document.

        Args:
            url: Archive URL of the primary document

        Returns:
            Document body as text
        """
        logger.info(f"Fetching filing document {url}")
        response = self._get(
            url,
            accept="text/html,application/xhtml+xml",
            rate_limit_delay=DOCUMENT_RATE_LIMIT_DELAY,
            error_delay=DOCUMENT_ERROR_DELAY,
        )
        return response.text

    def _select_latest(self, data: Dict[str, Any], cik: str, form: str) -> FilingSource:
        """Pick the first entry of the requested form; recent filings are newest first."""
        if not isinstance(data, dict):
            raise EdgarResponseError("Submissions response is not a JSON object", {"cik": cik})

        filings = data.get("filings")
        recent = filings.get("recent") if isinstance(filings, dict) else None
        if not recent:
            raise EdgarResponseError("No recent filings found", {"cik": cik})

        forms = recent.get("form")
        dates = recent.get("filingDate")
        accessions = recent.get("accessionNumber")
        documents = recent.get("primaryDocument")
        if not forms or not dates or not accessions or not documents:
            raise EdgarResponseError("Invalid filings data structure", {"cik": cik})

        for i, filing_form in enumerate(forms):
            if filing_form == form:
                accession = accessions[i]
                document_url = ARCHIVES_URL.format(
                    cik=cik,
                    accession=accession.replace('-', ''),
                    document=documents[i],
                )
                return FilingSource(
                    cik=cik,
                    form=filing_form,
                    filed_at=dates[i],
                    accession_number=accession,
                    url=document_url,
                )

        raise FilingNotFoundError(cik, form)

    def _get(self, url: str, accept: str, rate_limit_delay: float, error_delay: float) -> requests.Response:
        """GET with a single retry: after a 429, a failed status or a transport error."""
        headers = {"User-Agent": self.user_agent, "Accept": accept}

        for attempt in range(MAX_RETRIES + 1):
            can_retry = attempt < MAX_RETRIES

            try:
                response = requests.get(url, headers=headers, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                if not can_retry:
                    raise EdgarRequestError(f"Request failed: {e}", url) from e
                logger.warning(f"Request failed, retrying in {error_delay}s: {e}")
                time.sleep(error_delay)
                continue

            if response.ok:
                return response

            if not can_retry:
                raise EdgarRequestError(
                    f"EDGAR responded with status: {response.status_code}",
                    url,
                    status_code=response.status_code,
                )

            if response.status_code == 429:
                logger.warning(f"Rate limited, retrying in {rate_limit_delay}s...")
                time.sleep(rate_limit_delay)
            else:
                logger.warning(f"EDGAR responded with status {response.status_code}, retrying in {error_delay}s...")
                time.sleep(error_delay)

        # Unreachable: the last attempt either returns or raises
        raise EdgarRequestError("Request failed", url)
