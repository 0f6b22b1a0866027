import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class DeadlineExceededError(Exception):
    """Raised when an operation did not finish before its deadline."""

    def __init__(self, message: str = "Operation deadline exceeded"):
        super().__init__(message)


class Deadline:
    def __init__(self, seconds: float):
        if seconds <= 0:
            raise ValueError("deadline must be positive")
        self._loop = asyncio.get_running_loop()
        self.seconds = seconds
        self.when = self._loop.time() + seconds
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def expired(self) -> bool:
        return self._cancelled or self._loop.time() >= self.when

    def cancel(self) -> None:
        self._cancelled = True

    def check(self) -> None:
        if self.expired:
            raise DeadlineExceededError()

    @asynccontextmanager
    async def guard(self) -> AsyncIterator["Deadline"]:
        """Run the enclosed block until the deadline, then cancel it."""
        timeout = asyncio.timeout_at(self.when)
        try:
            async with timeout:
                yield self
        except TimeoutError as exc:
            # only our own timeout means the deadline passed
            if not timeout.expired():
                raise
            self.cancel()
            raise DeadlineExceededError(
                f"Operation did not complete within {self.seconds:g}s"
            ) from exc
