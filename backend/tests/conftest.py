import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from peernotes.database import Base, build_engine, get_db
from peernotes.main import app
from peernotes.models.note import Note

TEST_DB_URL = "sqlite:///./test_peernotes.db"

engine = build_engine(TEST_DB_URL)
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SAFE_VERDICT = '{"isHarmful": false, "reason": ""}'


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def ai_model():
    """Stand-in for the moderation model. Tests set invoke.return_value/side_effect."""
    with patch("peernotes.services.moderation_service.AIClient") as MockClient:
        mock_instance = MagicMock()
        mock_instance.model_name = "gemini-2.5-flash"
        mock_instance.invoke.return_value = SAFE_VERDICT
        MockClient.get_client.return_value = mock_instance
        yield mock_instance


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_notes(db):
    notes = [
        Note(title="Pandas groupby", subject="CS333", content="groupby and agg", tags=["Lesson 1"], likes=4),
        Note(title="CIA triad", subject="CSE1", content="Confidentiality first", tags=["Quiz"], likes=9),
        Note(title="Phishing signs", subject="CSE1", content="Check the sender domain", tags=["Midterms"], likes=1),
    ]
    for n in notes:
        db.add(n)
    db.commit()
    for n in notes:
        db.refresh(n)
    return notes


def post_note(client, **overrides) -> dict:
    payload = {"title": "T", "subject": "CS333", "content": "C", "tags": ["Quiz"]}
    payload.update(overrides)
    resp = client.post("/api/notes", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()
