# app/utils/auth_utils.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from sustainhub.core.config import settings
from sustainhub.core.error_messages import ErrorResponses

logger = logging.getLogger("sustainhub.auth")

IDENTITY_CLAIMS = ("name", "email", "login_method")


def create_session_token(open_id: str, name: Optional[str] = None, email: Optional[str] = None,
                         login_method: Optional[str] = None,
                         expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=settings.SESSION_TTL_DAYS))
    to_encode = {
        "sub": open_id,
        "name": name,
        "email": email,
        "login_method": login_method,
        "exp": expire,
        "type": "session",
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> dict:
    try:
        decoded = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Session token expired")
        raise ErrorResponses.INVALID_TOKEN
    except jwt.InvalidTokenError as e:
        logger.info("Invalid session token: %s", e)
        raise ErrorResponses.INVALID_TOKEN

    if decoded.get("type") != "session" or not decoded.get("sub"):
        raise ErrorResponses.INVALID_TOKEN
    return decoded


def verify_identity_token(id_token: str) -> dict:
    """Check an ID token from the identity provider and return its identity.

    The provider signs with ``IDENTITY_PROVIDER_SECRET``; ``sub`` is the opaque
    external user id.
    """
    try:
        claims = jwt.decode(
            id_token,
            settings.IDENTITY_PROVIDER_SECRET,
            algorithms=[settings.ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.InvalidTokenError as e:
        logger.info("Rejected identity token: %s", e)
        raise ErrorResponses.INVALID_TOKEN

    identity = {"open_id": claims["sub"]}
    for claim in IDENTITY_CLAIMS:
        if claims.get(claim) is not None:
            identity[claim] = claims[claim]
    return identity
