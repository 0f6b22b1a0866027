from enum import Enum


class FailureKind(str, Enum):
    ALREADY_EXISTS = "already_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"
    USER_NOT_FOUND = "user_not_found"
    MISSING_REFRESH_COOKIE = "missing_refresh_cookie"
    INTERNAL = "internal"

    @classmethod
    def of(cls, exc: BaseException) -> "FailureKind":
        if isinstance(exc, AuthFailure):
            return exc.kind
        return cls.INTERNAL


class AuthFailure(Exception):
    kind: FailureKind = FailureKind.INTERNAL
    default_message: str = "Authentication failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AlreadyExistsError(AuthFailure):
    kind = FailureKind.ALREADY_EXISTS
    default_message = "User with this email already exists"


class InvalidCredentialsError(AuthFailure):
    kind = FailureKind.INVALID_CREDENTIALS
    default_message = "Invalid email or password"


class InvalidTokenError(AuthFailure):
    kind = FailureKind.INVALID_TOKEN
    default_message = "Invalid token"


class ExpiredTokenError(AuthFailure):
    kind = FailureKind.EXPIRED_TOKEN
    default_message = "Token has expired"


class UserNotFoundError(AuthFailure):
    kind = FailureKind.USER_NOT_FOUND
    default_message = "User not found"


class MissingRefreshCookieError(AuthFailure):
    kind = FailureKind.MISSING_REFRESH_COOKIE
    default_message = "Invalid refresh token"


class InternalAuthError(AuthFailure):
    kind = FailureKind.INTERNAL
    default_message = "Internal authentication error"
