import http
import logging

logger = logging.getLogger('uvicorn.error')

DEFAULT_STATUS_CODE = 500
DEFAULT_ERROR_CODE = "internal"

class CustomException(Exception):
    """An error that is already shaped for the HTTP response."""

    def __init__(
        self,
        status_code: int = DEFAULT_STATUS_CODE,
        error_code: str = DEFAULT_ERROR_CODE,
        error_message: str | None = None,
    ):
        self.status_code = self._checked_status(status_code)
        self.error_code = self._checked_code(error_code)
        self.error_message = self._checked_message(error_message)
        super().__init__(self.error_message)

    @staticmethod
    def _checked_status(status_code) -> int:
        if isinstance(status_code, int) and 100 <= status_code <= 599:
            return status_code
        logger.critical(f"Invalid status_code {status_code!r} for CustomException, using {DEFAULT_STATUS_CODE}")
        return DEFAULT_STATUS_CODE

    @staticmethod
    def _checked_code(error_code) -> str:
        if isinstance(error_code, str) and error_code:
            return error_code
        logger.critical(f"Invalid error_code {error_code!r} for CustomException, using '{DEFAULT_ERROR_CODE}'")
        return DEFAULT_ERROR_CODE

    def _checked_message(self, error_message) -> str:
        if isinstance(error_message, str) and error_message:
            return error_message
        fallback = http.HTTPStatus(self.status_code).phrase
        if error_message is not None:
            logger.critical(f"Invalid error_message {error_message!r} for CustomException, using '{fallback}'")
        return fallback

    def to_body(self) -> dict:
        return {"message": self.error_message}
