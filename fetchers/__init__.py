"""Fetchers package for reading notes handed over by the storage layer."""

from .base_fetcher import BaseFetcher, FetcherError, NoteNotFoundError
from .file_fetcher import NoteFileFetcher

__all__ = [
    'BaseFetcher',
    'FetcherError',
    'NoteNotFoundError',
    'NoteFileFetcher',
]
