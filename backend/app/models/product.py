# app/models/product.py
from sqlalchemy import Column, DateTime, Integer, String, Text

from sustainhub.db.database import Base, utcnow


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Integer, nullable=False)  # MZN, no subunit
    category = Column(String(100), nullable=False)
    image_url = Column(Text, nullable=False)
    stock = Column(Integer, default=0, nullable=False)
    sustainability_score = Column(Integer, default=85, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
