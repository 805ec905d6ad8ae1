"""Per-user id sets (liked/reported notes) kept on local disk, like browser local storage."""

import json
import logging
from pathlib import Path
from typing import Optional, Set, Union

logger = logging.getLogger(__name__)


class IdSetStore:
    """A set of note ids, saved to a JSON file after every change when a path is given."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else None
        self._ids: Set[int] = self._load()

    def _load(self) -> Set[int]:
        if self.path is None or not self.path.exists():
            return set()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return {int(v) for v in raw}
        except (OSError, ValueError, TypeError) as exc:
            logger.warning("[client] ignoring unreadable id set %s: %s", self.path, exc)
            return set()

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(sorted(self._ids)), encoding="utf-8")

    def __contains__(self, note_id: int) -> bool:
        return note_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def add(self, note_id: int) -> None:
        self._ids.add(note_id)
        self._save()

    def discard(self, note_id: int) -> None:
        self._ids.discard(note_id)
        self._save()

    def ids(self) -> Set[int]:
        return set(self._ids)
