"""Pydantic schemas for the moderation endpoint and the gateway verdict."""

from pydantic import BaseModel, Field, PrivateAttr
from typing import Optional


class ModerationRequest(BaseModel):
    title: str = ""
    content: str = ""


class ModerationVerdict(BaseModel):
    is_harmful: bool = Field(False, serialization_alias="isHarmful")
    reason: Optional[str] = None

    # Set when the AI call itself failed and the verdict is the fail-open default.
    _service_failed: bool = PrivateAttr(default=False)

    @property
    def service_failed(self) -> bool:
        return self._service_failed

    @classmethod
    def fail_open(cls, reason: str, service_failed: bool = False) -> "ModerationVerdict":
        verdict = cls(is_harmful=False, reason=reason)
        verdict._service_failed = service_failed
        return verdict

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
