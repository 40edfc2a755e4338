"""
Bulk export report formatting.

Turns a BulkExportReport into log lines, console text, or JSON.
"""

import json
import logging
from typing import Optional

from models import BulkExportReport


def log_bulk_report(report: BulkExportReport, logger: Optional[logging.Logger] = None) -> None:
    """Log the bulk export summary and the titles of skipped notes."""
    logger = logger or logging.getLogger('zendown_export.orchestrator')

    logger.info(f"Bulk export completed: {report.succeeded} successful, {len(report.failed)} failed")
    if report.has_failures:
        logger.warning(f"Failed notes: {report.failed}")


def format_bulk_report(report: BulkExportReport) -> str:
    """Format the report for console display."""
    lines = [
        "Bulk export summary",
        f"  Exported: {report.succeeded}",
        f"  Failed:   {len(report.failed)}",
    ]
    for title in report.failed:
        lines.append(f"    - {title}")
    return '\n'.join(lines)


def report_to_json(report: BulkExportReport, indent: int = 2) -> str:
    """Serialize the report to JSON."""
    return json.dumps(report.to_dict(), indent=indent, ensure_ascii=False)


__all__ = ['log_bulk_report', 'format_bulk_report', 'report_to_json']
