from src.auth.errors import InternalAuthError
from src.auth.schemas import CredentialEnvelope, RefreshTokenEnvelope, TokenPair
from src.auth.service import AuthService
from src.common.config import get_settings
from src.common.deadline import Deadline


class SessionProtocol:
    def __init__(self, auth_service: AuthService, deadline_seconds: float | None = None):
        self.auth_service = auth_service
        self.deadline_seconds = (
            deadline_seconds if deadline_seconds is not None else get_settings().session_deadline_seconds
        )

    def _deadline(self) -> Deadline:
        return Deadline(self.deadline_seconds)

    async def register(self, envelope: CredentialEnvelope) -> None:
        deadline = self._deadline()
        async with deadline.guard():
            await self.auth_service.sign_up(deadline, envelope)

    async def authenticate(self, envelope: CredentialEnvelope) -> TokenPair:
        deadline = self._deadline()
        async with deadline.guard():
            pair = await self.auth_service.sign_in(deadline, envelope)
        return _require_pair(pair)

    async def refresh(self, envelope: RefreshTokenEnvelope) -> TokenPair:
        deadline = self._deadline()
        async with deadline.guard():
            pair = await self.auth_service.refresh(deadline, envelope)
        return _require_pair(pair)


def _require_pair(pair: object) -> TokenPair:
    if not isinstance(pair, TokenPair) or not pair.access_token or not pair.refresh_token:
        raise InternalAuthError("Auth service returned an incomplete token pair")
    return pair
