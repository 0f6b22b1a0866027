from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

from fastapi import Response

from src.auth.schemas import TokenPair

ACCESS_TOKEN_COOKIE = "access_token"
REFRESH_TOKEN_COOKIE = "refresh_token"
TOKEN_COOKIE_LIFESPAN = timedelta(days=7)


@dataclass(frozen=True)
class CookieDirective:
    name: str
    value: str
    duration: timedelta


def token_pair_directives(pair: TokenPair) -> list[CookieDirective]:
    return [
        CookieDirective(ACCESS_TOKEN_COOKIE, pair.access_token, TOKEN_COOKIE_LIFESPAN),
        CookieDirective(REFRESH_TOKEN_COOKIE, pair.refresh_token, TOKEN_COOKIE_LIFESPAN),
    ]


def cookie_attributes(directive: CookieDirective, now: datetime) -> dict[str, Any]:
    """Keyword arguments for ``Response.set_cookie``; scripts never see these tokens."""
    return {
        "key": directive.name,
        "value": directive.value,
        "path": "/",
        "domain": None,
        "expires": now + directive.duration,
        "httponly": True,
        "secure": True,
        "samesite": "strict",
    }


def set_cookies(
    response: Response,
    directives: Iterable[CookieDirective],
    now: datetime | None = None,
) -> None:
    now = now or datetime.now(timezone.utc)
    for directive in directives:
        response.set_cookie(**cookie_attributes(directive, now))
