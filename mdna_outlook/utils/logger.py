"""Logging configuration and utilities."""

import logging
import colorlog
from pathlib import Path
from typing import Optional, Union
from mdna_outlook.config.settings import LOG_DIR, LOG_FILENAME, LOG_FORMAT, LOG_DATE_FORMAT

# Global error log file
ERROR_LOG_PATH = LOG_DIR / LOG_FILENAME


def setup_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_dir: Directory for the error log file (defaults to LOG_DIR)
    """
    global ERROR_LOG_PATH

    # Determine log level
    log_level = logging.DEBUG if verbose else logging.INFO

    # Create formatters
    file_formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    # Console formatter with colors
    console_formatter = colorlog.ColoredFormatter(
        '%(log_color)s' + LOG_FORMAT,
        LOG_DATE_FORMAT,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        }
    )

    # Set up root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    root_logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    # File handler for errors
    log_dir = Path(log_dir) if log_dir else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    ERROR_LOG_PATH = log_dir / LOG_FILENAME

    error_handler = logging.FileHandler(ERROR_LOG_PATH, mode='a', encoding='utf-8')
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(file_formatter)
    root_logger.addHandler(error_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_error(message: str, source: Optional[Union[Path, str]] = None) -> None:
    """
    Log an error against the file or URL it concerns.

    Args:
        message: Error message
        source: Optional file path or URL related to the error
    """
    logger = get_logger("ERROR_LOGGER")

    if source:
        error_msg = f"[{source}] {message}"
    else:
        error_msg = message

    logger.error(error_msg)


def log_summary(report: dict) -> None:
    """
    Log an outlook report summary.

    Args:
        report: Report dictionary as produced by OutlookReport.to_dict()
    """
    logger = get_logger("SUMMARY")

    logger.info("=" * 60)
    logger.info("OUTLOOK EXTRACTION SUMMARY")
    logger.info("=" * 60)

    source = report.get("source")
    if source:
        logger.info(f"CIK: {source.get('cik')}")
        logger.info(f"Form: {source.get('form')} filed {source.get('filedAt')}")
        logger.info(f"Document: {source.get('url')}")

    logger.info(f"Confidence: {report.get('confidence')}")
    logger.info(f"Excerpt length: {len(report.get('excerpt', ''))} characters")

    if report.get("confidence") == "low":
        logger.warning("Low confidence excerpt, check the filing manually")

    logger.info("=" * 60)
