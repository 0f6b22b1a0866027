import asyncio
from email.utils import parsedate_to_datetime
from http.cookies import Morsel, SimpleCookie

from src.auth.schemas import AccountRef, TokenPair


class FakeAuthService:
    """AuthService double that records calls and replays canned results."""

    def __init__(self, sign_up=None, sign_in=None, refresh=None, delay: float = 0.0):
        self.results = {
            "sign_up": sign_up if sign_up is not None else AccountRef(user_id=1, email="a@b.com"),
            "sign_in": sign_in if sign_in is not None else TokenPair(access_token="acc-1", refresh_token="ref-1"),
            "refresh": refresh if refresh is not None else TokenPair(access_token="acc-2", refresh_token="ref-2"),
        }
        self.delay = delay
        self.calls: list[tuple[str, object]] = []
        self.deadlines = []

    async def _respond(self, name, deadline, envelope):
        self.calls.append((name, envelope))
        self.deadlines.append(deadline)
        if self.delay:
            await asyncio.sleep(self.delay)
        result = self.results[name]
        if isinstance(result, BaseException):
            raise result
        return result

    async def sign_up(self, deadline, envelope):
        return await self._respond("sign_up", deadline, envelope)

    async def sign_in(self, deadline, envelope):
        return await self._respond("sign_in", deadline, envelope)

    async def refresh(self, deadline, envelope):
        return await self._respond("refresh", deadline, envelope)


def parse_set_cookies(response) -> dict[str, Morsel]:
    cookies: dict[str, Morsel] = {}
    headers = response.headers
    raw = headers.get_list("set-cookie") if hasattr(headers, "get_list") else headers.getlist("set-cookie")
    for header in raw:
        jar = SimpleCookie()
        jar.load(header)
        for name, morsel in jar.items():
            cookies[name] = morsel
    return cookies


def cookie_expiry(morsel: Morsel):
    return parsedate_to_datetime(morsel["expires"])
