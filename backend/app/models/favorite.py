# app/models/favorite.py
from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer

from sustainhub.db.database import Base, utcnow

ITEM_TYPES = ("product", "blog")


class Favorite(Base):
    __tablename__ = "favorites"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    item_type = Column(Enum(*ITEM_TYPES, name="item_type"), nullable=False)
    item_id = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
