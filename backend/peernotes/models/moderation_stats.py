"""Singleton counter row for moderation statistics."""

from sqlalchemy import Column, Integer
from peernotes.database import Base

STATS_ROW_ID = 1


class ModerationStats(Base):
    __tablename__ = "moderation_stats"

    id = Column(Integer, primary_key=True)
    rejected_count = Column(Integer, nullable=False, default=0, server_default="0")  # posts vetoed by moderation
    reported_count = Column(Integer, nullable=False, default=0, server_default="0")  # distinct notes ever reported
