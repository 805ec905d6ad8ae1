"""Service layer package initialization."""

from peernotes.services import (
    note_service,
    moderation_service,
)
