import asyncio

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerifyMismatchError

from src.auth.errors import AlreadyExistsError, InvalidCredentialsError, UserNotFoundError
from src.auth.schemas import AccountRef, CredentialEnvelope, RefreshTokenEnvelope, TokenPair
from src.auth.tokens import ACCESS_TOKEN_TYPE, REFRESH_TOKEN_TYPE, decode_refresh_token, make_jwt
from src.common.config import Settings, get_settings
from src.common.deadline import Deadline
from src.users.store import UserStore


class LocalAuthService:
    def __init__(
        self,
        store: UserStore | None = None,
        settings: Settings | None = None,
        hasher: PasswordHasher | None = None,
    ):
        self.store = store or UserStore()
        self.settings = settings or get_settings()
        self.hasher = hasher or PasswordHasher()

    def _issue_pair(self, user_id: int) -> TokenPair:
        sub = str(user_id)
        return TokenPair(
            access_token=make_jwt(sub, self.settings.access_token_lifespan_minutes, ACCESS_TOKEN_TYPE, self.settings),
            refresh_token=make_jwt(sub, self.settings.refresh_token_lifespan_minutes, REFRESH_TOKEN_TYPE, self.settings),
        )

    async def sign_up(self, deadline: Deadline, envelope: CredentialEnvelope) -> AccountRef:
        deadline.check()
        if await self.store.get_by_email(envelope.email) is not None:
            raise AlreadyExistsError()

        hashed = await asyncio.to_thread(self.hasher.hash, envelope.password)
        deadline.check()
        # create() re-checks uniqueness under the store lock
        user = await self.store.create(envelope.email, hashed)
        return AccountRef(user_id=user.user_id, email=user.email)

    async def sign_in(self, deadline: Deadline, envelope: CredentialEnvelope) -> TokenPair:
        deadline.check()
        user = await self.store.get_by_email(envelope.email)
        if user is None:
            raise InvalidCredentialsError()
        try:
            await asyncio.to_thread(self.hasher.verify, user.hashed_password, envelope.password)
        except (VerifyMismatchError, InvalidHash):
            raise InvalidCredentialsError() from None

        deadline.check()
        return self._issue_pair(user.user_id)

    async def refresh(self, deadline: Deadline, envelope: RefreshTokenEnvelope) -> TokenPair:
        deadline.check()
        user_id = decode_refresh_token(envelope.refresh_token, self.settings)
        if await self.store.get_by_id(user_id) is None:
            raise UserNotFoundError()

        deadline.check()
        return self._issue_pair(user_id)
