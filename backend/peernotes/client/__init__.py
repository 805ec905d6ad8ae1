"""Python client for the PeerNotes API and the client-side note cache."""

from peernotes.client.api import NoteApiClient, NoteApiError
from peernotes.client.cache import NoteCache, FetchStatus, MutationState

__all__ = [
    "NoteApiClient", "NoteApiError",
    "NoteCache", "FetchStatus", "MutationState",
]
