"""Note fetcher reading a JSON or YAML dump of notes."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from models import Note
from .base_fetcher import BaseFetcher, FetcherError


class NoteFileFetcher(BaseFetcher):
    """Loads notes from a file holding a list of note objects.

    The file may be JSON or YAML, either a bare list or a mapping with a
    ``notes`` key, as produced by the notes API.
    """

    def __init__(self, notes_path: str, config: Optional[Dict[str, Any]] = None, logger=None):
        super().__init__(config or {}, logger)
        self.notes_path = Path(notes_path)
        self._notes: Optional[List[Note]] = None

    def fetch_notes(self) -> List[Note]:
        if self._notes is None:
            self._notes = self._load()
        return list(self._notes)

    def _load(self) -> List[Note]:
        if not self.notes_path.is_file():
            raise FetcherError(f"Notes file not found: {self.notes_path}")

        try:
            with open(self.notes_path, 'r', encoding='utf-8') as f:
                # JSON is a subset of YAML, so one parser covers both
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise FetcherError(f"Failed to parse notes file {self.notes_path}: {e}") from e

        if isinstance(data, dict):
            data = data.get('notes')
        if data is None:
            data = []
        if not isinstance(data, list):
            raise FetcherError(f"Notes file {self.notes_path} must contain a list of notes")

        notes = []
        for index, item in enumerate(data):
            if not isinstance(item, dict) or 'id' not in item:
                raise FetcherError(f"Entry {index} in {self.notes_path} is not a note object")
            try:
                notes.append(Note.from_dict(item))
            except (TypeError, ValueError) as e:
                raise FetcherError(f"Entry {index} in {self.notes_path} is invalid: {e}") from e

        self.logger.info(f"Loaded {len(notes)} notes from {self.notes_path}")
        return notes
