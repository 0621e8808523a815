# app/utils/storage_utils.py
import base64
import binascii
import logging
import time
import uuid
from functools import lru_cache
from pathlib import PurePosixPath

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from sustainhub.core.config import settings
from sustainhub.core.error_messages import ErrorResponses

logger = logging.getLogger("sustainhub.storage")


@lru_cache(maxsize=1)
def get_s3_client():
    return boto3.client(
        "s3",
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        region_name=settings.AWS_REGION,
    )


def public_url(key: str) -> str:
    if settings.STORAGE_PUBLIC_BASE_URL:
        return f"{settings.STORAGE_PUBLIC_BASE_URL.rstrip('/')}/{key}"
    return f"https://{settings.BUCKET_NAME}.s3.{settings.AWS_REGION}.amazonaws.com/{key}"


def decode_base64_payload(data: str) -> bytes:
    """Decode a base64 body, dropping a ``data:...;base64,`` prefix if present."""
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    try:
        payload = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        raise ErrorResponses.validation("File is not valid base64")
    if not payload:
        raise ErrorResponses.validation("File is empty")
    return payload


def build_key(folder: str, filename: str, prefix: str = "") -> str:
    ext = PurePosixPath(filename).suffix.lstrip(".").lower() or "jpg"
    return f"{folder}/{prefix}{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}.{ext}"


def storage_put(key: str, data: bytes, content_type: str) -> str:
    get_s3_client().put_object(
        Bucket=settings.BUCKET_NAME,
        Key=key,
        Body=data,
        ContentType=content_type,
    )
    logger.info("Uploaded %s (%d bytes)", key, len(data))
    return public_url(key)


async def upload_base64_image(file: str, filename: str, content_type: str, folder: str, prefix: str = "") -> dict:
    if not content_type.startswith("image/"):
        raise ErrorResponses.validation("Only image uploads are allowed")

    payload = decode_base64_payload(file)
    key = build_key(folder, filename, prefix)
    try:
        url = await run_in_threadpool(storage_put, key, payload, content_type)
    except (BotoCoreError, ClientError) as e:
        logger.error("Upload of %s failed: %s", key, e)
        raise ErrorResponses.internal("Failed to upload image")
    return {"url": url, "key": key}
