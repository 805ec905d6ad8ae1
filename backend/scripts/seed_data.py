"""Seed the database with demo notes."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from peernotes.database import SessionLocal, engine, Base
import peernotes.models  # noqa: F401

from peernotes.models.note import Note

DEMO_NOTES = [
    {
        "title": "Pandas groupby cheatsheet",
        "subject": "CS333",
        "content": "## groupby\n\n- `df.groupby('col').agg({'x': 'mean'})`\n- use `as_index=False` to keep columns flat",
        "tags": ["Lesson 1"],
        "likes": 12,
    },
    {
        "title": "CIA triad in one page",
        "subject": "CSE1",
        "content": "**Confidentiality**, **Integrity**, **Availability**.\n\nKnow one control for each before the quiz.",
        "tags": ["Quiz"],
        "likes": 7,
    },
    {
        "title": "Amdahl's law worked example",
        "subject": "CS373",
        "content": "Speedup = 1 / ((1 - p) + p / n). With p = 0.9 and n = 8, speedup is about 4.7.",
        "tags": ["Midterms"],
        "likes": 3,
    },
    {
        "title": "Scrum ceremonies recap",
        "subject": "CS352",
        "content": "Sprint planning, daily standup, sprint review, retrospective.",
        "tags": ["Lesson 2", "Finals"],
        "likes": 0,
    },
]


def seed():
    if engine is None:
        print("DATABASE_URL is empty. Nothing to seed.")
        return
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(Note).count() > 0:
            print("Database already seeded. Skipping.")
            return

        db.add_all([Note(**row) for row in DEMO_NOTES])
        db.commit()
        print("Seed data created successfully!")
        print(f"  Notes: {len(DEMO_NOTES)}")

    except Exception as e:
        db.rollback()
        raise e
    finally:
        db.close()


if __name__ == "__main__":
    seed()
