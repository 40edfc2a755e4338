"""Data models for the note export pipeline."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, List, Optional, Union


MEDIA_TYPE_MARKDOWN = 'text/markdown'
MEDIA_TYPE_HTML = 'text/html'
MEDIA_TYPE_ZIP = 'application/zip'


class TagType(Enum):
    """Classifies which renderer rules are eligible for a node."""
    BLOCK = "block"
    INLINE = "inline"


class Priority(IntEnum):
    """Renderer rule ordering. Lower values are tried first."""
    EARLY = 100
    STANDARD = 500
    LATE = 900


@dataclass
class Note:
    """A fully materialized note as handed over by the storage layer."""

    id: int
    title: str
    content: str  # HTML content
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Note':
        """Build a note from a decoded JSON/YAML mapping."""
        return cls(
            id=int(data['id']),
            title=str(data.get('title') or ''),
            content=str(data.get('content') or ''),
            created_at=_parse_timestamp(data.get('created_at')),
            updated_at=_parse_timestamp(data.get('updated_at')),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize note to dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value
    # Go's time encoding uses a trailing Z
    return datetime.fromisoformat(str(value).replace('Z', '+00:00'))


@dataclass(frozen=True)
class Handled:
    """A renderer rule fully rendered the node."""
    output: str


class TryNext:
    """A renderer rule declined the node."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'TRY_NEXT'


TRY_NEXT = TryNext()

RenderOutcome = Union[Handled, TryNext]


@dataclass(frozen=True)
class RendererRule:
    """A single rendering rule registered for one tag name and tag type."""

    name: str
    target_tag: str
    tag_type: TagType
    handler: Callable[..., RenderOutcome]
    priority: Priority = Priority.STANDARD


@dataclass(frozen=True)
class ExportedFile:
    """A named payload ready to be handed to the HTTP boundary."""

    filename: str
    content: bytes
    media_type: str

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'


@dataclass
class ExportResult:
    """Outcome of converting one note to markdown."""

    note: Note
    markdown: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BulkExportReport:
    """Per-call summary of notes written to the archive versus skipped."""

    succeeded: int = 0
    failed: List[str] = field(default_factory=list)

    def record_success(self) -> None:
        self.succeeded += 1

    def record_failure(self, title: str) -> None:
        self.failed.append(title)

    @property
    def total(self) -> int:
        return self.succeeded + len(self.failed)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize report to dictionary."""
        return {
            'succeeded': self.succeeded,
            'failed': list(self.failed),
            'total': self.total,
        }


__all__ = [
    'MEDIA_TYPE_MARKDOWN',
    'MEDIA_TYPE_HTML',
    'MEDIA_TYPE_ZIP',
    'TagType',
    'Priority',
    'Note',
    'Handled',
    'TryNext',
    'TRY_NEXT',
    'RenderOutcome',
    'RendererRule',
    'ExportedFile',
    'ExportResult',
    'BulkExportReport',
]
