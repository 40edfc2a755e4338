"""Tests for loading notes from JSON and YAML dumps."""

import json
from datetime import datetime, timezone

import pytest

from fetchers import FetcherError, NoteFileFetcher, NoteNotFoundError
from models import Note


NOTES = [
    {'id': 1, 'title': 'First', 'content': '<p>One</p>',
     'created_at': '2024-05-06T10:00:00Z', 'updated_at': '2024-05-07T11:30:00Z'},
    {'id': 2, 'title': 'Second', 'content': '<p>Two</p>'},
]


def write_notes(tmp_path, data, name='notes.json'):
    path = tmp_path / name
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding='utf-8')
    return str(path)


class TestNoteFileFetcher:
    def test_loads_json_list(self, tmp_path):
        notes = NoteFileFetcher(write_notes(tmp_path, NOTES)).fetch_notes()

        assert [note.id for note in notes] == [1, 2]
        assert notes[0].title == 'First'
        assert notes[0].created_at == datetime(2024, 5, 6, 10, 0, tzinfo=timezone.utc)
        assert notes[1].created_at is None

    def test_loads_wrapped_mapping(self, tmp_path):
        path = write_notes(tmp_path, {'notes': NOTES})
        assert len(NoteFileFetcher(path).fetch_notes()) == 2

    def test_loads_yaml(self, tmp_path):
        path = write_notes(tmp_path, "- id: 5\n  title: Yaml\n  content: <p>y</p>\n", 'notes.yaml')
        assert NoteFileFetcher(path).fetch_notes() == [Note(5, 'Yaml', '<p>y</p>')]

    def test_empty_file_has_no_notes(self, tmp_path):
        assert NoteFileFetcher(write_notes(tmp_path, '')).fetch_notes() == []

    def test_missing_fields_default_to_empty(self, tmp_path):
        note = NoteFileFetcher(write_notes(tmp_path, [{'id': 3}])).fetch_notes()[0]
        assert (note.title, note.content) == ('', '')

    def test_fetch_note_by_id(self, tmp_path):
        fetcher = NoteFileFetcher(write_notes(tmp_path, NOTES))
        assert fetcher.fetch_note(2).title == 'Second'

    def test_fetch_unknown_note(self, tmp_path):
        fetcher = NoteFileFetcher(write_notes(tmp_path, NOTES))
        with pytest.raises(NoteNotFoundError, match='Note not found: 42'):
            fetcher.fetch_note(42)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FetcherError, match='Notes file not found'):
            NoteFileFetcher(str(tmp_path / 'nope.json')).fetch_notes()

    def test_unparseable_file(self, tmp_path):
        with pytest.raises(FetcherError, match='Failed to parse'):
            NoteFileFetcher(write_notes(tmp_path, '{"id": [1, 2')).fetch_notes()

    def test_scalar_document_is_rejected(self, tmp_path):
        with pytest.raises(FetcherError, match='must contain a list'):
            NoteFileFetcher(write_notes(tmp_path, '"just a string"')).fetch_notes()

    def test_entry_without_id_is_rejected(self, tmp_path):
        with pytest.raises(FetcherError, match='Entry 1'):
            NoteFileFetcher(write_notes(tmp_path, [NOTES[0], {'title': 'No id'}])).fetch_notes()

    def test_invalid_timestamp_is_rejected(self, tmp_path):
        path = write_notes(tmp_path, [{'id': 1, 'created_at': 'yesterday'}])
        with pytest.raises(FetcherError, match='is invalid'):
            NoteFileFetcher(path).fetch_notes()

    def test_notes_are_cached(self, tmp_path):
        path = tmp_path / 'notes.json'
        path.write_text(json.dumps(NOTES), encoding='utf-8')
        fetcher = NoteFileFetcher(str(path))
        fetcher.fetch_notes()

        path.unlink()

        assert len(fetcher.fetch_notes()) == 2


class TestNoteModel:
    def test_round_trip_dict(self):
        note = Note.from_dict(NOTES[0])
        assert note.to_dict()['updated_at'] == '2024-05-07T11:30:00+00:00'
        assert Note.from_dict(note.to_dict()) == note

    def test_string_id_is_coerced(self):
        assert Note.from_dict({'id': '7'}).id == 7
