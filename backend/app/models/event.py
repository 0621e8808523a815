# app/models/event.py
from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String, Text

from sustainhub.db.database import Base, utcnow

EVENT_STATUSES = ("upcoming", "ongoing", "completed", "cancelled")


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title_pt = Column(Text, nullable=False)
    title_en = Column(Text, nullable=False)
    description_pt = Column(Text, nullable=False)
    description_en = Column(Text, nullable=False)
    event_date = Column(DateTime(timezone=True), nullable=False)
    location = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    image_url = Column(Text, nullable=True)
    max_participants = Column(Integer, nullable=True)
    organizer_name = Column(String(100), nullable=True)
    status = Column(Enum(*EVENT_STATUSES, name="event_status"), default="upcoming", nullable=False)
    published = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
