# app/models/consultation.py
from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, Text

from sustainhub.db.database import Base, utcnow

CONSULTATION_STATUSES = ("pending", "approved", "completed", "cancelled")


class Consultation(Base):
    __tablename__ = "consultations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    scheduled_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(
        Enum(*CONSULTATION_STATUSES, name="consultation_status"), default="pending", nullable=False
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
