"""HTTP client for the Note API. The one authoritative client-side entry point to the backend."""

from typing import Any, List, Optional

import httpx

from peernotes.schemas.note import NoteOut, ReportedNoteOut


class NoteApiError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NoteApiClient:
    def __init__(self, base_url: str = "http://localhost:8000", http: Optional[httpx.Client] = None, timeout: float = 10.0):
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, *, json: Any = None, fallback: str) -> Any:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.HTTPError as exc:
            raise NoteApiError(f"{fallback}: {exc}") from exc
        payload = self._json_or_none(response)
        if response.is_error:
            raise NoteApiError(self._error_message(payload, fallback), response.status_code)
        return payload

    def _json_or_none(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    def _error_message(self, payload: Any, fallback: str) -> str:
        if not isinstance(payload, dict):
            return fallback
        message = payload.get("error") or fallback
        reason = payload.get("reason")
        return f"{message}: {reason}" if reason else message

    def get_notes(self) -> List[NoteOut]:
        rows = self._request("GET", "/api/notes", fallback="Failed to fetch notes")
        return [NoteOut.model_validate(row) for row in rows or []]

    def get_note(self, note_id: int) -> NoteOut:
        row = self._request("GET", f"/api/notes/{note_id}", fallback="Failed to fetch note")
        return NoteOut.model_validate(row)

    def create_note(self, title: str, subject: str, content: str, tags: List[str]) -> NoteOut:
        row = self._request(
            "POST",
            "/api/notes",
            json={"title": title, "subject": subject, "content": content, "tags": list(tags or [])},
            fallback="Failed to create note",
        )
        return NoteOut.model_validate(row)

    def like_note(self, note_id: int) -> NoteOut:
        row = self._request("POST", f"/api/notes/{note_id}/like", fallback="Failed to like note")
        return NoteOut.model_validate(row)

    def report_note(self, note_id: int) -> bool:
        data = self._request("POST", f"/api/notes/{note_id}/report", fallback="Failed to report note")
        return isinstance(data, dict) and data.get("success") is True

    def delete_note(self, note_id: int) -> bool:
        data = self._request("DELETE", f"/api/notes/{note_id}", fallback="Failed to delete note")
        return isinstance(data, dict) and data.get("success") is True

    def get_reported_notes(self) -> List[ReportedNoteOut]:
        rows = self._request("GET", "/api/reported-notes", fallback="Failed to fetch reported notes")
        return [ReportedNoteOut.model_validate(row) for row in rows or []]

    def get_stats(self) -> dict:
        return self._request("GET", "/api/stats", fallback="Failed to fetch stats")

    def moderate(self, title: str, content: str) -> dict:
        # A failed model call still answers with a fail-open verdict (HTTP 500).
        try:
            response = self._http.post("/api/moderate", json={"title": title, "content": content})
        except httpx.HTTPError as exc:
            raise NoteApiError(f"Moderation failed: {exc}") from exc
        payload = self._json_or_none(response)
        if isinstance(payload, dict) and "isHarmful" in payload:
            return payload
        raise NoteApiError("Moderation failed", response.status_code)
