"""In-memory ZIP archive writer for bulk note exports."""

import io
import logging
import zipfile
from typing import List, Optional

from exceptions import ArchiveEntryError, ArchiveFinalizeError


class ArchiveWriter:
    """Buffers a ZIP archive in memory, one text entry at a time."""

    def __init__(self, logger: Optional[logging.Logger] = None,
                 compression: int = zipfile.ZIP_DEFLATED):
        """
        Initialize the archive writer.

        Args:
            logger: Logger instance
            compression: zipfile compression constant
        """
        self.logger = logger or logging.getLogger('zendown_export.exporters.archive_writer')
        self._buffer = io.BytesIO()
        self._zip = zipfile.ZipFile(self._buffer, mode='w', compression=compression)
        self._closed = False
        self.entries: List[str] = []

    def add_entry(self, name: str, text: str) -> None:
        """
        Write one UTF-8 text entry.

        Raises:
            ArchiveEntryError: If the entry cannot be created or written
        """
        if self._closed:
            raise ArchiveEntryError(name, "archive already finalized")

        try:
            with self._zip.open(name, mode='w') as entry:
                entry.write(text.encode('utf-8'))
        except (OSError, ValueError, RuntimeError, zipfile.BadZipFile) as e:
            raise ArchiveEntryError(name, str(e)) from e

        self.entries.append(name)
        self.logger.debug(f"Added archive entry: {name}")

    def finalize(self) -> bytes:
        """
        Close the archive and return its bytes.

        Raises:
            ArchiveFinalizeError: If the archive cannot be closed
        """
        if not self._closed:
            try:
                self._zip.close()
            except (OSError, ValueError, RuntimeError) as e:
                raise ArchiveFinalizeError(f"Failed to create zip file: {e}") from e
            self._closed = True

        return self._buffer.getvalue()


__all__ = ['ArchiveWriter']
