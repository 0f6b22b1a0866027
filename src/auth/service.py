"""Auth capability consumed by the session protocol; failures are raised as ``AuthFailure`` subclasses."""

from typing import Protocol, runtime_checkable

from src.auth.schemas import AccountRef, CredentialEnvelope, RefreshTokenEnvelope, TokenPair
from src.common.deadline import Deadline


@runtime_checkable
class AuthService(Protocol):
    async def sign_up(self, deadline: Deadline, envelope: CredentialEnvelope) -> AccountRef: ...

    async def sign_in(self, deadline: Deadline, envelope: CredentialEnvelope) -> TokenPair: ...

    async def refresh(self, deadline: Deadline, envelope: RefreshTokenEnvelope) -> TokenPair: ...
