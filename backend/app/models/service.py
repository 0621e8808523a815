# app/models/service.py
from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String, Text

from sustainhub.db.database import Base, utcnow

PRICE_TYPES = ("hourly", "daily", "project")


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title_pt = Column(Text, nullable=False)
    title_en = Column(Text, nullable=False)
    description_pt = Column(Text, nullable=False)
    description_en = Column(Text, nullable=False)
    specialist = Column(String(100), nullable=False)
    price = Column(Integer, nullable=False)
    price_type = Column(Enum(*PRICE_TYPES, name="price_type"), nullable=False)
    features = Column(Text, nullable=True)  # JSON list
    available = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
