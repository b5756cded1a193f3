"""File handling utilities for reading saved filings and writing reports."""

import json
import chardet
from pathlib import Path
from typing import Any, Dict, Optional
from mdna_outlook.config.settings import (
    ENCODING_PREFERENCES,
    FALLBACK_ENCODING,
    MAX_FILE_SIZE_MB,
)
from mdna_outlook.utils.logger import get_logger

logger = get_logger(__name__)


class FileHandler:
    """Handles file I/O operations with encoding detection."""

    def read_file(self, file_path: Path) -> Optional[str]:
        """
        Read file content with automatic encoding detection.

        Args:
            file_path: Path to file

        Returns:
            File content as string or None if failed
        """
        file_path = Path(file_path)
        if not file_path.exists():
            logger.error(f"File not found: {file_path}")
            return None

        # Check file size
        file_size_mb = file_path.stat().st_size / (1024 * 1024)
        if file_size_mb > MAX_FILE_SIZE_MB:
            logger.error(f"File too large ({file_size_mb:.1f} MB): {file_path}")
            return None

        try:
            raw_data = file_path.read_bytes()
        except OSError as e:
            logger.error(f"Error reading file {file_path}: {e}")
            return None

        return self.decode(raw_data)

    def decode(self, raw_data: bytes) -> str:
        """
        Decode bytes, trying preferred encodings before detection.

        Args:
            raw_data: Raw document bytes

        Returns:
            Decoded text
        """
        # Try preferred encodings first
        for encoding in ENCODING_PREFERENCES:
            try:
                content = raw_data.decode(encoding)
                logger.debug(f"Successfully decoded with {encoding} encoding")
                return content
            except UnicodeDecodeError:
                continue

        # If preferred encodings fail, detect encoding
        encoding = chardet.detect(raw_data)['encoding']
        if encoding:
            logger.info(f"Detected encoding: {encoding}")
            try:
                return raw_data.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                logger.warning(f"Detected encoding {encoding} failed, using {FALLBACK_ENCODING}")

        return raw_data.decode(FALLBACK_ENCODING, errors='replace')

    def write_file(self, file_path: Path, content: str, encoding: str = 'utf-8'):
        """
        Write content to file.

        Args:
            file_path: Path to output file
            content: Content to write
            encoding: Output encoding
        """
        file_path = Path(file_path)
        try:
            # Create parent directory if needed
            file_path.parent.mkdir(parents=True, exist_ok=True)

            with open(file_path, 'w', encoding=encoding) as f:
                f.write(content)

            logger.debug(f"Successfully wrote file: {file_path}")

        except Exception as e:
            logger.error(f"Error writing file {file_path}: {e}")
            raise

    def write_report(self, file_path: Path, report: Dict[str, Any]):
        """Write a report dictionary as indented JSON."""
        self.write_file(file_path, json.dumps(report, indent=2, ensure_ascii=False) + '\n')
