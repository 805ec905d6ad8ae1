"""SQLAlchemy model package initialization."""

from peernotes.models.note import Note, ReportedNote
from peernotes.models.moderation_stats import ModerationStats

__all__ = [
    "Note", "ReportedNote",
    "ModerationStats",
]
