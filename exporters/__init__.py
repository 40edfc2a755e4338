"""Export helpers shared by the single-note and bulk export paths.

Package Structure:
- filename: Title to file name sanitizing
- html_template: Standalone HTML document wrapper for raw exports
- archive_writer: In-memory ZIP archive for bulk exports
"""

from .archive_writer import ArchiveWriter
from .filename import sanitize_filename
from .html_template import render_html_document

__all__ = [
    'ArchiveWriter',
    'sanitize_filename',
    'render_html_document',
]
