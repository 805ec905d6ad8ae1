"""Client-side note cache: fetched list, derived filter/sort view and optimistic likes."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from peernotes.client.api import NoteApiClient, NoteApiError
from peernotes.client.catalog import ALL, SORT_NEWEST, SORT_POPULAR, SORT_MODES
from peernotes.client.local_store import IdSetStore
from peernotes.client.toasts import ToastQueue
from peernotes.config import settings
from peernotes.schemas.note import NoteOut, ReportedNoteOut

logger = logging.getLogger(__name__)

FETCH_ERROR = "Failed to fetch notes. Please try again later."


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class MutationState(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ROLLED_BACK = "rolled_back"


@dataclass
class LikeMutation:
    note_id: int
    state: MutationState = MutationState.PENDING


def filter_notes(notes: Iterable[NoteOut], subject: str = ALL, tag: str = ALL, search: str = "") -> List[NoteOut]:
    needle = (search or "").lower()
    result = []
    for note in notes:
        if subject != ALL and note.subject != subject:
            continue
        if tag != ALL and tag not in (note.tags or []):
            continue
        if needle and needle not in note.title.lower() and needle not in note.content.lower():
            continue
        result.append(note)
    return result


def sort_notes(notes: Iterable[NoteOut], sort_by: str = SORT_POPULAR) -> List[NoteOut]:
    if sort_by == SORT_NEWEST:
        return sorted(notes, key=lambda n: n.created_at, reverse=True)
    return sorted(notes, key=lambda n: n.likes, reverse=True)


class NoteCache:
    def __init__(
        self,
        api: NoteApiClient,
        liked: Optional[IdSetStore] = None,
        reported: Optional[IdSetStore] = None,
        toasts: Optional[ToastQueue] = None,
    ):
        self.api = api
        self.liked = liked if liked is not None else IdSetStore()
        self.reported = reported if reported is not None else IdSetStore()
        self.toasts = toasts if toasts is not None else ToastQueue()

        self.notes: List[NoteOut] = []
        self.status = FetchStatus.IDLE
        self.error: Optional[str] = None

        self.subject = ALL
        self.tag = ALL
        self.search = ""
        self.sort_by = SORT_POPULAR

        self.reports: List[ReportedNoteOut] = []
        self.stats: Optional[dict] = None

    # --- reads ---

    def fetch(self) -> bool:
        self.status = FetchStatus.LOADING
        self.error = None
        try:
            self.notes = self.api.get_notes()
        except NoteApiError as exc:
            logger.warning("[client] failed to load notes: %s", exc)
            self.error = FETCH_ERROR
            self.status = FetchStatus.FAILED
            return False
        self.status = FetchStatus.LOADED
        return True

    def set_sort(self, sort_by: str) -> None:
        if sort_by not in SORT_MODES:
            raise ValueError(f"unknown sort mode: {sort_by}")
        self.sort_by = sort_by

    def visible_notes(self) -> List[NoteOut]:
        return sort_notes(filter_notes(self.notes, self.subject, self.tag, self.search), self.sort_by)

    def find(self, note_id: int) -> Optional[NoteOut]:
        return next((n for n in self.notes if n.id == note_id), None)

    # --- writes ---

    def _replace(self, note_id: int, **changes) -> None:
        self.notes = [n.model_copy(update=changes) if n.id == note_id else n for n in self.notes]

    def like(self, note_id: int) -> Optional[LikeMutation]:
        """Apply a like locally, then confirm it with the server or roll it back."""
        if note_id in self.liked:
            return None
        mutation = LikeMutation(note_id=note_id)
        current = self.find(note_id)
        if current is not None:
            self._replace(note_id, likes=current.likes + 1)
        self.liked.add(note_id)

        try:
            updated = self.api.like_note(note_id)
        except NoteApiError as exc:
            logger.warning("[client] like failed for note %s: %s", note_id, exc)
            current = self.find(note_id)
            if current is not None:
                self._replace(note_id, likes=max(0, current.likes - 1))
            self.liked.discard(note_id)
            self.toasts.add("Failed to like note.")
            mutation.state = MutationState.ROLLED_BACK
            return mutation

        self.notes = [updated if n.id == note_id else n for n in self.notes]
        mutation.state = MutationState.CONFIRMED
        return mutation

    def report(self, note_id: int) -> bool:
        if note_id in self.reported:
            self.toasts.add("Already reported.")
            return False
        try:
            ok = self.api.report_note(note_id)
        except NoteApiError as exc:
            logger.warning("[client] report failed for note %s: %s", note_id, exc)
            ok = False
        if not ok:
            self.toasts.add("Failed to report note.")
            return False
        self.reported.add(note_id)
        self.toasts.add("Note reported.")
        return True

    def post(self, title: str, subject: str, content: str, tags: Optional[List[str]] = None) -> Optional[NoteOut]:
        self.error = None
        try:
            created = self.api.create_note(title, subject, content[: settings.MAX_CONTENT_CHARS], list(tags or []))
        except NoteApiError as exc:
            logger.warning("[client] failed to post note: %s", exc)
            self.error = exc.message or "Failed to post note."
            self.toasts.add(self.error)
            return None
        self.notes = [created] + self.notes
        self.subject = ALL
        self.tag = ALL
        self.sort_by = SORT_NEWEST
        self.toasts.add("Note posted.")
        return created

    # --- admin ---

    def load_reports(self) -> List[ReportedNoteOut]:
        try:
            self.reports = self.api.get_reported_notes()
        except NoteApiError as exc:
            logger.warning("[client] failed to load reported notes: %s", exc)
            self.reports = []
        return self.reports

    def load_stats(self) -> Optional[dict]:
        try:
            self.stats = self.api.get_stats()
        except NoteApiError as exc:
            logger.warning("[client] failed to load stats: %s", exc)
        return self.stats

    def delete(self, note_id: int) -> bool:
        try:
            ok = self.api.delete_note(note_id)
        except NoteApiError as exc:
            logger.warning("[client] delete failed for note %s: %s", note_id, exc)
            ok = False
        if not ok:
            self.toasts.add("Failed to remove note.")
            return False
        self.notes = [n for n in self.notes if n.id != note_id]
        self.reports = [r for r in self.reports if r.note_id != note_id]
        self.toasts.add("Note removed successfully.")
        return True
