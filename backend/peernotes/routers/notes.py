"""Notes API router. Validates requests and delegates business logic to the service layer."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from peernotes.database import get_db
from peernotes.exceptions import NotFound
from peernotes.schemas.note import NoteCreate, NoteOut, ReportedNoteOut, StatsOut, SuccessOut
from peernotes.services import note_service
from peernotes.services.moderation_service import ModerationService

router = APIRouter(prefix="/api", tags=["notes"])


def get_moderation_service() -> ModerationService:
    return ModerationService()


@router.get("/notes", response_model=List[NoteOut])
def list_notes(db: Session = Depends(get_db)):
    return note_service.list_notes(db)


@router.post("/notes", response_model=NoteOut)
def create_note(
    data: NoteCreate,
    db: Session = Depends(get_db),
    moderation: ModerationService = Depends(get_moderation_service),
):
    return note_service.submit_note(db, data, moderation)


@router.get("/notes/{note_id}", response_model=NoteOut)
def get_note(note_id: int, db: Session = Depends(get_db)):
    return note_service.get_note(db, note_id)


@router.delete("/notes/{note_id}", response_model=SuccessOut)
def delete_note(note_id: int, db: Session = Depends(get_db)):
    if not note_service.delete_note(db, note_id):
        raise NotFound()
    return {"success": True, "message": "Note deleted"}


@router.post("/notes/{note_id}/like", response_model=NoteOut)
def like_note(note_id: int, db: Session = Depends(get_db)):
    return note_service.increment_likes(db, note_id)


@router.post("/notes/{note_id}/report", response_model=SuccessOut)
def report_note(note_id: int, db: Session = Depends(get_db)):
    created = note_service.add_report(db, note_id)
    return {"success": True, "message": "Note reported" if created else "Note already reported"}


@router.get("/reported-notes", response_model=List[ReportedNoteOut])
def list_reported_notes(db: Session = Depends(get_db)):
    return note_service.list_reports(db)


@router.get("/stats", response_model=StatsOut)
def get_stats(db: Session = Depends(get_db)):
    return note_service.read_stats(db)
