"""Transient notifications that expire a few seconds after they are pushed."""

import itertools
import time
from dataclasses import dataclass
from typing import Callable, List

TOAST_TTL_SECONDS = 4.0


@dataclass
class Toast:
    id: int
    message: str
    expires_at: float


class ToastQueue:
    def __init__(self, ttl: float = TOAST_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._ids = itertools.count(1)
        self._toasts: List[Toast] = []

    def add(self, message: str) -> Toast:
        toast = Toast(id=next(self._ids), message=message, expires_at=self._clock() + self.ttl)
        self._toasts.append(toast)
        return toast

    def active(self) -> List[Toast]:
        now = self._clock()
        self._toasts = [t for t in self._toasts if t.expires_at > now]
        return list(self._toasts)

    def messages(self) -> List[str]:
        return [t.message for t in self.active()]
