"""API error types. Each maps to one HTTP status and renders as {"error", "reason"}."""

from typing import Optional

from fastapi import HTTPException


class PeerNotesError(HTTPException):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, reason: Optional[str] = None):
        super().__init__(status_code=self.status_code, detail=message or self.message)
        self.reason = reason


class InvalidInput(PeerNotesError):
    status_code = 400
    message = "Missing required fields"


class ContentRejected(PeerNotesError):
    status_code = 400
    message = "Content rejected by moderation"


class NotFound(PeerNotesError):
    status_code = 404
    message = "Note not found"


class StorageError(PeerNotesError):
    status_code = 500
    message = "Database error"


class StorageUnavailable(PeerNotesError):
    status_code = 501
    message = "Database not configured"
