"""Combines filing retrieval with outlook extraction."""

from pathlib import Path
from typing import Optional

from mdna_outlook.config.settings import DEFAULT_CIK, DEFAULT_FORM
from mdna_outlook.core.edgar_client import EdgarClient
from mdna_outlook.core.extractor import OutlookExtractor
from mdna_outlook.core.file_handler import FileHandler
from mdna_outlook.models.filing import ExtractionResult, OutlookReport
from mdna_outlook.utils.logger import get_logger, log_error

logger = get_logger(__name__)


class OutlookService:
    """Fetches the latest filing for a company and extracts its outlook."""

    def __init__(self, client: Optional[EdgarClient] = None,
                 extractor: Optional[OutlookExtractor] = None):
        self._client = client
        self.extractor = extractor or OutlookExtractor()
        self.file_handler = FileHandler()

    @property
    def client(self) -> EdgarClient:
        # Created lazily so offline extraction works without EDGAR_USER_AGENT
        if self._client is None:
            self._client = EdgarClient()
        return self._client

    def latest_outlook(self, cik=DEFAULT_CIK, form: str = DEFAULT_FORM) -> OutlookReport:
        """
        Extract the outlook from a company's latest filing of a form type.

        Args:
            cik: Central Index Key
            form: Form type to look up

        Returns:
            OutlookReport with the filing provenance and the extraction result
        """
        source = self.client.get_latest_filing(cik, form)
        logger.info(f"Fetching MD&A from {source.url}")

        html = self.client.fetch_document(source.url)
        result = self.extractor.extract(html)

        if result.failure is not None:
            log_error(f"Outlook extraction fell back to placeholder ({result.failure.value})", source.url)

        return OutlookReport(source=source, result=result)

    def outlook_from_file(self, file_path: Path) -> Optional[ExtractionResult]:
        """
        Extract the outlook from a filing document saved on disk.

        Args:
            file_path: Path to the HTML document

        Returns:
            ExtractionResult or None if the file could not be read
        """
        content = self.file_handler.read_file(file_path)
        if content is None:
            log_error("Could not read filing document", file_path)
            return None

        return self.extractor.extract(content)
