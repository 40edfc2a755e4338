"""Logging setup and bulk export progress tracking."""

import logging
import logging.handlers
import time
from typing import Optional

import colorlog

LOGGER_NAME = 'zendown_export'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def setup_logging(verbosity: int = 0, log_file: Optional[str] = None,
                  level: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``zendown_export`` logger for a CLI run.

    Args:
        verbosity: Count of -v flags (0=WARNING, 1=INFO, 2+=DEBUG)
        log_file: Optional path for a rotating log file
        level: Explicit level name, overriding verbosity

    Returns:
        The configured package logger

    Raises:
        ValueError: If level is not a known level name
    """
    if level:
        if level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{level}'. Must be one of: {list(LOG_LEVELS)}")
        log_level = getattr(logging, level.upper())
    elif verbosity >= 2:
        log_level = logging.DEBUG
    elif verbosity == 1:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(colorlog.ColoredFormatter(
        fmt='%(log_color)s' + LOG_FORMAT,
        datefmt=DATE_FORMAT,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        }
    ))
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding='utf-8'
            )
        except OSError as e:
            logger.warning(f"Cannot write export log to {log_file}: {e}")
        else:
            file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)
            logger.info(f"Export log: {log_file}")

    return logger


class ProgressTracker:
    """
    Counts notes written to a bulk archive versus skipped.

    Logs a running count every ``log_every`` notes and a summary when the
    block exits, at ERROR when nothing was exported and WARNING when some
    notes were skipped.
    """

    def __init__(self, total_notes: int, logger: Optional[logging.Logger] = None,
                 log_every: int = 25):
        self.total_notes = total_notes
        self.log_every = log_every
        self.exported = 0
        self.skipped = 0
        self.started: Optional[float] = None
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    @property
    def processed(self) -> int:
        return self.exported + self.skipped

    def __enter__(self) -> 'ProgressTracker':
        self.started = time.monotonic()
        self.logger.info(f"Exporting {self.total_notes} notes to archive")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.started is None:
            return

        if exc_type is not None:
            self.logger.error(
                f"Bulk export aborted after {self.processed}/{self.total_notes} notes"
            )
            return

        elapsed = format_elapsed(time.monotonic() - self.started)
        if self.total_notes and self.skipped == self.total_notes:
            log = self.logger.error
        elif self.skipped:
            log = self.logger.warning
        else:
            log = self.logger.info
        log(f"Archived {self.exported}/{self.total_notes} notes, "
            f"{self.skipped} skipped, in {elapsed}")

    def record(self, exported: bool) -> None:
        """Count one note as exported or skipped."""
        if exported:
            self.exported += 1
        else:
            self.skipped += 1

        if self.processed % self.log_every == 0:
            self.logger.info(f"Processed {self.processed}/{self.total_notes} notes")


def format_elapsed(seconds: float) -> str:
    """Format a duration as ``1.2s`` or ``3m 4s``."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, seconds = divmod(int(seconds), 60)
    return f"{minutes}m {seconds}s"


def log_section(title: str, logger: Optional[logging.Logger] = None) -> None:
    """Log a banner line announcing an export command."""
    logger = logger or logging.getLogger(LOGGER_NAME)
    logger.info(f"==== {title} ====")


__all__ = [
    'LOGGER_NAME',
    'setup_logging',
    'ProgressTracker',
    'format_elapsed',
    'log_section',
]
