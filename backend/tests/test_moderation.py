"""Moderation gateway parsing, fail-open behavior and the /api/moderate endpoint."""

from unittest.mock import MagicMock

from peernotes.config import settings
from peernotes.services.moderation_service import (
    ModerationService,
    SERVICE_FAILED_REASON,
    UNPARSEABLE_REASON,
    build_prompt,
    parse_verdict,
)


def _service(reply=None, error=None):
    client = MagicMock()
    client.invoke.return_value = reply
    if error is not None:
        client.invoke.side_effect = error
    return ModerationService(client=client), client


def test_reply_without_braces_fails_open():
    verdict = parse_verdict("The note looks fine to me.")
    assert verdict.is_harmful is False
    assert verdict.reason == UNPARSEABLE_REASON


def test_malformed_json_fails_open():
    verdict = parse_verdict("{isHarmful: yes, reason: }")
    assert verdict.is_harmful is False
    assert verdict.reason == UNPARSEABLE_REASON


def test_json_surrounded_by_text_is_extracted():
    reply = 'Here is my answer:\n```json\n{"isHarmful": true, "reason": "Threatens violence"}\n```\nThanks.'
    verdict = parse_verdict(reply)
    assert verdict.is_harmful is True
    assert verdict.reason == "Threatens violence"


def test_non_boolean_flag_is_not_harmful():
    assert parse_verdict('{"isHarmful": "true"}').is_harmful is False


def test_prompt_carries_title_content_and_languages():
    prompt = build_prompt("My title", "Body {with braces}")
    assert "Title: My title" in prompt
    assert "Content: Body {with braces}" in prompt
    assert "English and Tagalog" in prompt
    assert "profanity" in prompt


def test_classify_uses_model_reply():
    service, client = _service('{"isHarmful": true, "reason": "Harassment"}')
    verdict = service.classify("t", "c")
    assert verdict.is_harmful is True
    assert verdict.reason == "Harassment"
    assert verdict.service_failed is False
    prompt = client.invoke.call_args.args[0]
    assert "Title: t" in prompt


def test_classify_model_error_fails_open():
    service, _ = _service(error=TimeoutError("model timed out"))
    verdict = service.classify("t", "c")
    assert verdict.is_harmful is False
    assert verdict.reason == SERVICE_FAILED_REASON
    assert verdict.service_failed is True


def test_classify_disabled_skips_model(monkeypatch):
    monkeypatch.setattr(settings, "MODERATION_ENABLED", False)
    service, client = _service('{"isHarmful": true}')
    assert service.classify("t", "c").is_harmful is False
    client.invoke.assert_not_called()


def test_moderate_endpoint(client, ai_model):
    ai_model.invoke.return_value = '{"isHarmful": true, "reason": "Explicit material"}'
    resp = client.post("/api/moderate", json={"title": "t", "content": "c"})
    assert resp.status_code == 200
    assert resp.json() == {"isHarmful": True, "reason": "Explicit material"}


def test_moderate_endpoint_outage_returns_fail_open_payload(client, ai_model):
    ai_model.invoke.side_effect = ConnectionError("unreachable")
    resp = client.post("/api/moderate", json={"title": "t", "content": "c"})
    assert resp.status_code == 500
    assert resp.json() == {"isHarmful": False, "reason": SERVICE_FAILED_REASON}
