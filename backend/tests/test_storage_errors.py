"""Store availability and unexpected store failures map to 501 and 500."""

from sqlalchemy.exc import OperationalError

from peernotes import database
from peernotes.database import get_db
from peernotes.main import app
from peernotes.services import note_service


def test_store_endpoints_answer_501_without_database(client, monkeypatch):
    monkeypatch.setattr(database, "SessionLocal", None)
    monkeypatch.delitem(app.dependency_overrides, get_db)

    for method, path in [
        ("GET", "/api/notes"),
        ("GET", "/api/notes/1"),
        ("DELETE", "/api/notes/1"),
        ("POST", "/api/notes/1/like"),
        ("GET", "/api/stats"),
    ]:
        resp = client.request(method, path)
        assert resp.status_code == 501, path
        assert resp.json() == {"error": "Database not configured"}

    resp = client.post("/api/notes", json={"title": "T", "subject": "CS333", "content": "C", "tags": []})
    assert resp.status_code == 501

    assert client.get("/api/health").json()["database"] == "not_configured"


def test_unexpected_store_failure_is_500(client, monkeypatch):
    def _boom(db):
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    monkeypatch.setattr(note_service, "list_reports", _boom)
    resp = client.get("/api/reported-notes")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Database error"}


def test_build_engine_without_url():
    assert database.build_engine("") is None
    assert database.build_engine("   ") is None
