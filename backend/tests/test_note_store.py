"""Note store atomicity and idempotence checks at the service layer."""

import pytest

from peernotes.exceptions import NotFound
from peernotes.models.note import Note, ReportedNote
from peernotes.services import note_service
from tests.conftest import TestingSession


def test_interleaved_likes_are_not_lost(seed_notes):
    note_id = seed_notes[2].id
    first = TestingSession()
    second = TestingSession()
    try:
        # Both sessions have read likes=1 before either writes.
        assert first.get(Note, note_id).likes == 1
        assert second.get(Note, note_id).likes == 1

        note_service.increment_likes(second, note_id)
        result = note_service.increment_likes(first, note_id)

        assert result.likes == 3
    finally:
        first.close()
        second.close()


def test_increment_likes_missing_note(db):
    with pytest.raises(NotFound):
        note_service.increment_likes(db, 123)


def test_add_report_snapshots_note(db, seed_notes):
    note = seed_notes[0]
    assert note_service.add_report(db, note.id) is True
    assert note_service.add_report(db, note.id) is False

    row = db.query(ReportedNote).filter(ReportedNote.note_id == note.id).one()
    assert row.title == note.title
    assert row.subject == note.subject
    assert row.content == note.content
    assert row.reported_at is not None


def test_add_report_missing_note(db):
    with pytest.raises(NotFound):
        note_service.add_report(db, 404)


def test_delete_note_reports_absence(db, seed_notes):
    assert note_service.delete_note(db, seed_notes[0].id) is True
    assert note_service.delete_note(db, seed_notes[0].id) is False


def test_counters_start_at_zero_and_only_grow(db, seed_notes):
    assert note_service.read_stats(db) == {"visible_notes": 3, "admin_removed": 0, "auto_moderated": 0}

    note_service.increment_rejected_count(db)
    note_service.increment_rejected_count(db)
    note_service.delete_note(db, seed_notes[0].id)

    stats = note_service.read_stats(db)
    assert stats["auto_moderated"] == 2
    assert stats["visible_notes"] == 2


def test_list_notes_orders_by_created_at(db):
    old = Note(title="old", subject="CS352", content="x", tags=[])
    db.add(old)
    db.commit()
    db.refresh(old)
    old.created_at = old.created_at.replace(year=old.created_at.year - 1)
    db.commit()
    new = note_service.create_note(db, "new", "CS352", "y", [])

    assert [n.id for n in note_service.list_notes(db)] == [new.id, old.id]
