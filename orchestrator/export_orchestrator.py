"""
Export orchestrator for single-note and bulk note exports.

This module drives the three export entry points consumed by the HTTP layer:
per-note Markdown, per-note raw HTML, and all notes as one ZIP archive.
"""

import logging
from datetime import date
from typing import Optional, Sequence, Tuple

from tqdm import tqdm

from config_loader import EngineConfig
from converters.markdown_converter import NoteMarkdownConverter
from exceptions import ArchiveEntryError, ConversionError, NoContentError
from exporters.archive_writer import ArchiveWriter
from exporters.filename import sanitize_filename
from exporters.html_template import render_html_document
from logger import ProgressTracker
from models import (
    MEDIA_TYPE_HTML,
    MEDIA_TYPE_MARKDOWN,
    MEDIA_TYPE_ZIP,
    BulkExportReport,
    ExportedFile,
    ExportResult,
    Note,
)
from .export_report import log_bulk_report


class ExportOrchestrator:
    """Converts notes to Markdown or standalone HTML and packages bulk exports."""

    def __init__(self, config: Optional[EngineConfig] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize export orchestrator.

        Args:
            config: Immutable engine configuration (defaults when omitted)
            logger: Optional logger instance
        """
        self.config = config or EngineConfig()
        self.logger = logger or logging.getLogger('zendown_export.orchestrator')
        self.converter = NoteMarkdownConverter(
            rules=self.config.rules,
            logger=self.logger,
            config=self.config.markdown_options(),
        )

    def render_markdown(self, note: Note) -> str:
        """
        Render a note to its full Markdown document, title header included.

        Raises:
            ConversionError: If the note's HTML cannot be converted
        """
        try:
            body = self.converter.to_markdown(note.content)
        except Exception as e:
            raise ConversionError(note.id, note.title, str(e)) from e

        return f"# {note.title}\n\n{body}"

    def convert_note(self, note: Note) -> ExportResult:
        """Convert a note without raising; failures are carried in the result."""
        try:
            return ExportResult(note=note, markdown=self.render_markdown(note))
        except ConversionError as e:
            return ExportResult(note=note, error=e)

    def export_markdown(self, note: Note) -> ExportedFile:
        """
        Export a single note as a Markdown file.

        Args:
            note: Note to export

        Returns:
            ExportedFile named ``{sanitized-title}.md``

        Raises:
            ConversionError: If the note's HTML cannot be converted
        """
        self.logger.info(f"Exporting note {note.id} as markdown")

        try:
            markdown = self.render_markdown(note)
        except ConversionError as e:
            self.logger.error(str(e))
            raise

        return ExportedFile(
            filename=f"{sanitize_filename(note.title)}.md",
            content=markdown.encode('utf-8'),
            media_type=MEDIA_TYPE_MARKDOWN,
        )

    def export_raw_html(self, note: Note) -> ExportedFile:
        """
        Export a single note as a standalone HTML document.

        The stored content is embedded verbatim; no conversion takes place.

        Args:
            note: Note to export

        Returns:
            ExportedFile named ``{sanitized-title}.html``
        """
        self.logger.info(f"Exporting note {note.id} as raw HTML")

        document = render_html_document(note.title, note.content)
        return ExportedFile(
            filename=f"{sanitize_filename(note.title)}.html",
            content=document.encode('utf-8'),
            media_type=MEDIA_TYPE_HTML,
        )

    def export_all_as_zip(self, notes: Sequence[Note],
                          today: Optional[date] = None) -> Tuple[ExportedFile, BulkExportReport]:
        """
        Export every note as Markdown, packaged as one ZIP archive.

        A note that fails to convert, or whose archive entry cannot be
        written, is skipped and recorded in the report; the batch continues.

        Args:
            notes: Notes to export
            today: Date used in the archive name (defaults to the current date)

        Returns:
            Tuple of (archive file, bulk export report)

        Raises:
            NoContentError: If there are no notes
            ArchiveFinalizeError: If the archive cannot be finalized
        """
        if not notes:
            raise NoContentError()

        report = BulkExportReport()
        archive = ArchiveWriter(logger=self.logger)

        with ProgressTracker(total_notes=len(notes), logger=self.logger) as tracker:
            for note in tqdm(notes, desc='Exporting notes', unit='note',
                             disable=not self.config.show_progress):
                result = self.convert_note(note)
                if not result.ok:
                    self.logger.error(str(result.error))
                    report.record_failure(note.title)
                    tracker.record(exported=False)
                    continue

                entry_name = f"{sanitize_filename(note.title)}-{note.id}.md"
                try:
                    archive.add_entry(entry_name, result.markdown)
                except ArchiveEntryError as e:
                    self.logger.error(f"Failed to write note {note.id} ({note.title}) to zip: {e}")
                    report.record_failure(note.title)
                    tracker.record(exported=False)
                    continue

                report.record_success()
                tracker.record(exported=True)

        content = archive.finalize()

        export_date = today or date.today()
        filename = f"{self.config.archive_prefix}-{export_date.strftime('%Y-%m-%d')}.zip"

        log_bulk_report(report, logger=self.logger)

        return ExportedFile(filename=filename, content=content, media_type=MEDIA_TYPE_ZIP), report


__all__ = ['ExportOrchestrator']
