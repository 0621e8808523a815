# app/models/user.py
from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String, Text

from sustainhub.db.database import Base, utcnow

ROLES = ("user", "admin")
ACCESS_LEVELS = ("free", "login", "premium")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    open_id = Column(String(64), unique=True, nullable=False, index=True)
    name = Column(Text, nullable=True)
    email = Column(String(320), nullable=True)
    login_method = Column(String(64), nullable=True)

    # Auth / account
    role = Column(Enum(*ROLES, name="user_role"), default="user", nullable=False)
    access_level = Column(Enum(*ACCESS_LEVELS, name="access_level"), default="login", nullable=False)
    language = Column(String(2), default="pt", nullable=False)

    # Profile
    phone = Column(String(20), nullable=True)
    address = Column(Text, nullable=True)
    bio = Column(Text, nullable=True)
    profile_picture = Column(Text, nullable=True)

    # Notifications
    email_notifications = Column(Boolean, default=True, nullable=False)
    order_updates = Column(Boolean, default=True, nullable=False)
    promotions = Column(Boolean, default=False, nullable=False)
    is_first_login = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    last_signed_in = Column(DateTime(timezone=True), default=utcnow, nullable=False)
