# app/models/news.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from sustainhub.db.database import Base, utcnow


class News(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title_pt = Column(Text, nullable=False)
    title_en = Column(Text, nullable=False)
    summary_pt = Column(Text, nullable=False)
    summary_en = Column(Text, nullable=False)
    content_pt = Column(Text, nullable=False)
    content_en = Column(Text, nullable=False)
    source = Column(String(200), nullable=True)
    author = Column(String(100), nullable=True)
    category = Column(String(100), nullable=False)
    image_url = Column(Text, nullable=True)
    published_at = Column(DateTime(timezone=True), nullable=True)
    published = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
