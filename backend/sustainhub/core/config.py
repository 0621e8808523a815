# sustainhub/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./sustainhub.db"
    DB_ECHO: bool = False

    # Sessions
    JWT_SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "sustainhub_session"
    SESSION_TTL_DAYS: int = 30
    COOKIE_SECURE: bool = False

    # Identity provider (signs the ID tokens exchanged for a session)
    IDENTITY_PROVIDER_SECRET: str = "change-me-too"
    OWNER_OPEN_ID: Optional[str] = None

    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # Orders
    ORDER_STRICT_TRANSITIONS: bool = False

    # Object storage
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_REGION: str = "us-east-1"
    BUCKET_NAME: str = "sustainhub-uploads"
    STORAGE_PUBLIC_BASE_URL: Optional[str] = None

    # Mail
    SMTP_SERVER: Optional[str] = None
    SMTP_PORT: int = 465
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None


settings = Settings()
