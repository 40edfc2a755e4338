"""
Orchestration package for note exports.

This package sequences conversion and packaging for the three export entry
points: single note as Markdown, single note as raw HTML, all notes as ZIP.
"""

from .export_orchestrator import ExportOrchestrator
from .export_report import format_bulk_report, log_bulk_report, report_to_json

__all__ = [
    'ExportOrchestrator',
    'format_bulk_report',
    'log_bulk_report',
    'report_to_json',
]
