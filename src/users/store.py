import asyncio
from dataclasses import dataclass

from src.auth.errors import AlreadyExistsError


@dataclass(frozen=True)
class UserRecord:
    user_id: int
    email: str
    hashed_password: str


class UserStore:
    """In-memory account store. Emails are unique, compared case-insensitively."""

    def __init__(self):
        self._by_email: dict[str, UserRecord] = {}
        self._by_id: dict[int, UserRecord] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    @staticmethod
    def _key(email: str) -> str:
        return email.strip().lower()

    async def create(self, email: str, hashed_password: str) -> UserRecord:
        async with self._lock:
            key = self._key(email)
            if key in self._by_email:
                raise AlreadyExistsError()
            user = UserRecord(user_id=self._next_id, email=email, hashed_password=hashed_password)
            self._next_id += 1
            self._by_email[key] = user
            self._by_id[user.user_id] = user
            return user

    async def get_by_email(self, email: str) -> UserRecord | None:
        return self._by_email.get(self._key(email))

    async def get_by_id(self, user_id: int) -> UserRecord | None:
        return self._by_id.get(user_id)

    async def delete(self, user_id: int) -> bool:
        async with self._lock:
            user = self._by_id.pop(user_id, None)
            if user is None:
                return False
            self._by_email.pop(self._key(user.email), None)
            return True
