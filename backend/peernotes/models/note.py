"""SQLAlchemy models for notes and the reported-notes log."""

from sqlalchemy import Column, Integer, Text, DateTime, JSON, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from peernotes.database import Base


class Note(Base):
    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    subject = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    likes = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    reports = relationship("ReportedNote", back_populates="note", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_notes_created_at", "created_at"),
    )


class ReportedNote(Base):
    __tablename__ = "reported_notes"

    # One row per note: the first report wins.
    note_id = Column(Integer, ForeignKey("notes.id", ondelete="CASCADE"), primary_key=True)
    title = Column(Text, nullable=False)
    subject = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False)
    reported_at = Column(DateTime, nullable=False, server_default=func.now())

    note = relationship("Note", back_populates="reports")

    __table_args__ = (
        Index("idx_reported_notes_reported_at", "reported_at"),
    )
