import logging
from dataclasses import dataclass
from enum import Enum

from fastapi import status

from src.auth.errors import AuthFailure, FailureKind
from src.common.custom_exception import CustomException

logger = logging.getLogger('uvicorn.error')

INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorCategory(str, Enum):
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    INTERNAL_ERROR = "internal_error"


_CATEGORY_BY_KIND: dict[FailureKind, ErrorCategory] = {
    FailureKind.ALREADY_EXISTS: ErrorCategory.CONFLICT,
    FailureKind.INVALID_CREDENTIALS: ErrorCategory.UNAUTHORIZED,
    FailureKind.INVALID_TOKEN: ErrorCategory.UNAUTHORIZED,
    FailureKind.EXPIRED_TOKEN: ErrorCategory.UNAUTHORIZED,
    FailureKind.USER_NOT_FOUND: ErrorCategory.UNAUTHORIZED,
    FailureKind.MISSING_REFRESH_COOKIE: ErrorCategory.UNAUTHORIZED,
    FailureKind.INTERNAL: ErrorCategory.INTERNAL_ERROR,
}

# Refresh rejections share one message so callers cannot tell them apart.
REFRESH_REJECTED_MESSAGE = "Invalid refresh token"
_REFRESH_REJECTIONS = frozenset({
    FailureKind.INVALID_TOKEN,
    FailureKind.EXPIRED_TOKEN,
    FailureKind.USER_NOT_FOUND,
    FailureKind.MISSING_REFRESH_COOKIE,
})

_STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCategory.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCategory.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class Classification:
    kind: FailureKind
    category: ErrorCategory
    status_code: int
    message: str


def classify(exc: BaseException) -> Classification:
    kind = FailureKind.of(exc)
    category = _CATEGORY_BY_KIND.get(kind, ErrorCategory.INTERNAL_ERROR)
    if category is ErrorCategory.INTERNAL_ERROR:
        message = INTERNAL_ERROR_MESSAGE
    elif kind in _REFRESH_REJECTIONS:
        message = REFRESH_REJECTED_MESSAGE
    else:
        message = exc.message if isinstance(exc, AuthFailure) else str(exc)
    return Classification(
        kind=kind,
        category=category,
        status_code=_STATUS_BY_CATEGORY[category],
        message=message,
    )


def to_http_exception(exc: BaseException, operation: str) -> CustomException:
    classification = classify(exc)
    if classification.category is ErrorCategory.INTERNAL_ERROR:
        logger.error(f"Error while {operation}: {exc!r}", exc_info=exc)
    return CustomException(
        status_code=classification.status_code,
        error_code=classification.kind.value,
        error_message=classification.message,
    )
