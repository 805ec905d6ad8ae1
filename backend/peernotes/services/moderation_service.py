"""Moderation gateway. Asks the AI model to classify a note and turns its reply into a verdict.

Every failure path is fail-open: a broken model reply or an unreachable model
never blocks a post.
"""

import json
import logging
from typing import Any, Dict, Optional

from peernotes.config import settings
from peernotes.schemas.moderation import ModerationVerdict
from peernotes.services.ai_client import AIClient

logger = logging.getLogger(__name__)

UNPARSEABLE_REASON = "Could not parse model response."
SERVICE_FAILED_REASON = "Moderation service failed."

MODERATION_PROMPT = (
    "You are a content moderation AI.\n"
    "Analyze the following text for harmful or unsafe content in both English and Tagalog such as:\n"
    "- self-harm\n"
    "- hate speech\n"
    "- violence\n"
    "- harassment\n"
    "- explicit or illegal material\n"
    "- sexual language\n"
    "- profanity or slurs\n\n"
    "Respond ONLY with a valid JSON object in this exact format:\n"
    "{\n"
    '  "isHarmful": true/false,\n'
    '  "reason": "A brief explanation if harmful"\n'
    "}\n\n"
    "Title: {title}\n"
    "Content: {content}\n"
)


def build_prompt(title: str, content: str) -> str:
    return MODERATION_PROMPT.replace("{title}", title or "").replace("{content}", content or "")


def extract_json_object(raw_text: Optional[str]) -> Optional[Dict[str, Any]]:
    """Parse the span between the first '{' and the last '}' of a model reply.

    Returns None when there is no such span or it is not a JSON object.
    """
    text = (raw_text or "").strip()
    start = text.find("{")
    end = text.rfind("}")
    if start < 0 or end < start:
        return None
    try:
        parsed = json.loads(text[start:end + 1])
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def parse_verdict(raw_text: Optional[str]) -> ModerationVerdict:
    parsed = extract_json_object(raw_text)
    if parsed is None:
        return ModerationVerdict.fail_open(UNPARSEABLE_REASON)
    reason = parsed.get("reason")
    return ModerationVerdict(
        is_harmful=parsed.get("isHarmful") is True,
        reason=str(reason) if reason not in (None, "") else None,
    )


class ModerationService:
    def __init__(self, client: Optional[AIClient] = None):
        self._client = client

    @property
    def client(self) -> AIClient:
        if self._client is None:
            self._client = AIClient.get_client()
        return self._client

    def classify(self, title: str, content: str) -> ModerationVerdict:
        if not settings.MODERATION_ENABLED:
            return ModerationVerdict(is_harmful=False)
        try:
            raw = self.client.invoke(build_prompt(title, content))
        except Exception as exc:
            logger.error("[moderation] model call failed: %s", exc)
            return ModerationVerdict.fail_open(SERVICE_FAILED_REASON, service_failed=True)

        verdict = parse_verdict(raw)
        if verdict.reason == UNPARSEABLE_REASON:
            logger.warning("[moderation] unparseable model response: %.200s", raw)
        return verdict
