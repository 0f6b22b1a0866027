from datetime import datetime, timezone, timedelta
import uuid

import jwt

from src.auth.errors import ExpiredTokenError, InvalidTokenError
from src.common.config import Settings

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

def _now_utc() -> datetime:
    return datetime.now(timezone.utc)

def make_jwt(sub: str, minutes: int, token_type: str, settings: Settings) -> str:
    now = _now_utc()
    payload = {
        "sub": sub,
        "typ": token_type,
        "iat": now,
        "exp": now + timedelta(minutes=minutes),
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

def decode_refresh_token(token: str, settings: Settings) -> int:
    """Return the user id a refresh token was issued for."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError() from None
    except jwt.InvalidTokenError:
        raise InvalidTokenError() from None

    if payload.get("typ") != REFRESH_TOKEN_TYPE:
        raise InvalidTokenError()
    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        raise InvalidTokenError() from None
