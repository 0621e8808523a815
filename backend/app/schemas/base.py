# app/schemas/base.py
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_validator("*", mode="after")
    @classmethod
    def as_utc(cls, value):
        # SQLite hands back naive datetimes; every stored timestamp is UTC
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc)
        return value


class SuccessResponse(CamelModel):
    success: bool = True


class IdResponse(SuccessResponse):
    id: int


class UploadRequest(CamelModel):
    file: str  # base64, optionally a data URI
    filename: str
    content_type: str


class UploadResponse(CamelModel):
    url: str
    key: str
