"""Abstract base fetcher interface and common functionality."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from models import Note


class FetcherError(Exception):
    """Base exception for fetcher-related errors."""
    pass


class NoteNotFoundError(FetcherError):
    """Exception for a note id that the source does not contain."""
    pass


class BaseFetcher(ABC):
    """Abstract base class for note sources."""

    def __init__(self, config: Dict[str, Any], logger=None):
        """
        Initialize base fetcher with configuration and logger.

        Args:
            config: Configuration dictionary
            logger: Logger instance (optional, uses module logger if not provided)
        """
        self.config = config
        self.logger = logger or logging.getLogger('zendown_export.fetcher')

    @abstractmethod
    def fetch_notes(self) -> List[Note]:
        """
        Fetch every note in the source, in source order.

        Returns:
            List of Note objects
        """
        pass

    def fetch_note(self, note_id: int) -> Note:
        """
        Fetch a single note by id.

        Raises:
            NoteNotFoundError: If no note has that id
        """
        for note in self.fetch_notes():
            if note.id == note_id:
                return note
        raise NoteNotFoundError(f"Note not found: {note_id}")
