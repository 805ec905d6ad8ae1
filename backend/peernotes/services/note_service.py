"""Note store domain service. Owns note, report log and moderation counter persistence."""

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from peernotes.exceptions import ContentRejected, InvalidInput, NotFound
from peernotes.models.moderation_stats import ModerationStats, STATS_ROW_ID
from peernotes.models.note import Note, ReportedNote
from peernotes.schemas.note import NoteCreate
from peernotes.services.moderation_service import ModerationService

logger = logging.getLogger(__name__)


def create_note(db: Session, title: str, subject: str, content: str, tags: Optional[List[str]] = None) -> Note:
    note = Note(title=title, subject=subject, content=content, tags=list(tags or []), likes=0)
    db.add(note)
    db.commit()
    db.refresh(note)
    logger.info("[store] note %s created (subject=%s)", note.id, note.subject)
    return note


def submit_note(db: Session, data: NoteCreate, moderation: ModerationService) -> Note:
    """Validate, moderate, then persist a posted note."""
    if not data.title.strip() or not data.content.strip():
        raise InvalidInput("Title and content are required")

    verdict = moderation.classify(data.title, data.content)
    if verdict.is_harmful:
        increment_rejected_count(db)
        logger.warning("[notes] post rejected by moderation: %s", verdict.reason)
        raise ContentRejected(reason=verdict.reason)

    return create_note(db, data.title, data.subject, data.content, data.tags)


def list_notes(db: Session) -> List[Note]:
    return db.query(Note).order_by(Note.created_at.desc(), Note.id.desc()).all()


def get_note(db: Session, note_id: int) -> Note:
    note = db.query(Note).filter(Note.id == note_id).first()
    if not note:
        raise NotFound()
    return note


def increment_likes(db: Session, note_id: int) -> Note:
    # The increment runs in the database so concurrent likes are never lost.
    updated = (
        db.query(Note)
        .filter(Note.id == note_id)
        .update({Note.likes: Note.likes + 1}, synchronize_session=False)
    )
    db.commit()
    if not updated:
        raise NotFound()
    note = get_note(db, note_id)
    db.refresh(note)
    return note


def delete_note(db: Session, note_id: int) -> bool:
    note = db.query(Note).filter(Note.id == note_id).first()
    if not note:
        return False
    db.delete(note)
    db.commit()
    logger.info("[store] note %s deleted", note_id)
    return True


def add_report(db: Session, note_id: int) -> bool:
    """Log a report for a note. Returns False when the note was already reported."""
    note = get_note(db, note_id)
    if db.query(ReportedNote).filter(ReportedNote.note_id == note_id).first():
        return False
    db.add(ReportedNote(note_id=note.id, title=note.title, subject=note.subject, content=note.content))
    try:
        db.commit()
    except IntegrityError:
        # A concurrent report inserted the row first.
        db.rollback()
        if db.query(Note.id).filter(Note.id == note_id).first() is None:
            raise NotFound()
        return False
    _increment_stat(db, ModerationStats.reported_count)
    logger.info("[store] note %s reported", note_id)
    return True


def list_reports(db: Session) -> List[ReportedNote]:
    return db.query(ReportedNote).order_by(ReportedNote.reported_at.desc(), ReportedNote.note_id.desc()).all()


def _ensure_stats_row(db: Session) -> None:
    if db.query(ModerationStats.id).filter(ModerationStats.id == STATS_ROW_ID).first():
        return
    db.add(ModerationStats(id=STATS_ROW_ID, rejected_count=0, reported_count=0))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()


def _increment_stat(db: Session, column) -> None:
    _ensure_stats_row(db)
    db.query(ModerationStats).filter(ModerationStats.id == STATS_ROW_ID).update(
        {column: column + 1}, synchronize_session=False
    )
    db.commit()


def increment_rejected_count(db: Session) -> None:
    _increment_stat(db, ModerationStats.rejected_count)


def read_stats(db: Session) -> dict:
    visible = db.query(func.count(Note.id)).scalar() or 0
    row = db.query(ModerationStats).filter(ModerationStats.id == STATS_ROW_ID).first()
    return {
        "visible_notes": int(visible),
        # Distinct notes ever reported, an approximation of admin removals.
        "admin_removed": int(row.reported_count) if row else 0,
        "auto_moderated": int(row.rejected_count) if row else 0,
    }
