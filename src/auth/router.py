from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, Request, Response, status

from src.auth.classifier import to_http_exception
from src.auth.cookies import REFRESH_TOKEN_COOKIE, set_cookies, token_pair_directives
from src.auth.errors import MissingRefreshCookieError
from src.auth.schemas import CredentialEnvelope, MessageResponse, RefreshTokenEnvelope
from src.auth.session import SessionProtocol

auth_router = APIRouter(prefix="/auth", tags=["auth"])


def get_session_protocol(request: Request) -> SessionProtocol:
    return request.app.state.session_protocol


@auth_router.post("/signup", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def sign_up(
    body: CredentialEnvelope,
    session: Annotated[SessionProtocol, Depends(get_session_protocol)],
) -> MessageResponse:
    try:
        await session.register(body)
    except Exception as exc:
        raise to_http_exception(exc, "registering") from exc

    return MessageResponse(message="User successfully registered")


@auth_router.post("/signin", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def sign_in(
    body: CredentialEnvelope,
    response: Response,
    session: Annotated[SessionProtocol, Depends(get_session_protocol)],
) -> MessageResponse:
    try:
        pair = await session.authenticate(body)
    except Exception as exc:
        raise to_http_exception(exc, "authorizing") from exc

    set_cookies(response, token_pair_directives(pair))
    return MessageResponse(message="Logged in successfully")


@auth_router.post("/refresh", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def refresh(
    response: Response,
    session: Annotated[SessionProtocol, Depends(get_session_protocol)],
    refresh_token: Annotated[str | None, Cookie(alias=REFRESH_TOKEN_COOKIE)] = None,
) -> MessageResponse:
    if not refresh_token:
        raise to_http_exception(MissingRefreshCookieError(), "refreshing")

    try:
        pair = await session.refresh(RefreshTokenEnvelope(refresh_token=refresh_token))
    except Exception as exc:
        raise to_http_exception(exc, "refreshing") from exc

    set_cookies(response, token_pair_directives(pair))
    return MessageResponse(message="Tokens updated successfully")
