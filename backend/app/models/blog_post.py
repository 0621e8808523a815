# app/models/blog_post.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from sustainhub.db.database import Base, utcnow


class BlogPost(Base):
    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title_pt = Column(Text, nullable=False)
    title_en = Column(Text, nullable=False)
    excerpt_pt = Column(Text, nullable=False)
    excerpt_en = Column(Text, nullable=False)
    content_pt = Column(Text, nullable=False)
    content_en = Column(Text, nullable=False)
    author = Column(String(100), nullable=False)
    category = Column(String(100), nullable=False)
    image_url = Column(Text, nullable=False)
    read_time = Column(Integer, nullable=False)  # minutes
    published = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
