"""Error kinds raised by the note export engine."""

from typing import Optional


class ExportError(Exception):
    """Base exception for export-related errors."""
    pass


class ConversionError(ExportError):
    """Rendering a note's HTML tree to Markdown failed."""

    def __init__(self, note_id: Optional[int], title: str, message: str = ''):
        self.note_id = note_id
        self.title = title
        self.message = message
        super().__init__(f"Failed to convert note {note_id} ({title}) to markdown: {message}")


class NoContentError(ExportError):
    """Bulk export was invoked with zero notes."""

    def __init__(self, message: str = "No notes to export"):
        super().__init__(message)


class ArchiveEntryError(ExportError):
    """Creating or writing a single archive entry failed."""

    def __init__(self, entry_name: str, message: str = ''):
        self.entry_name = entry_name
        super().__init__(f"Failed to write archive entry '{entry_name}': {message}")


class ArchiveFinalizeError(ExportError):
    """Closing the archive failed; no partial archive is produced."""
    pass


__all__ = [
    'ExportError',
    'ConversionError',
    'NoContentError',
    'ArchiveEntryError',
    'ArchiveFinalizeError',
]
