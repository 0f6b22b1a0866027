import os

from fastapi import FastAPI

from src.auth.local_service import LocalAuthService
from src.auth.router import auth_router
from src.auth.service import AuthService
from src.auth.session import SessionProtocol
from src.common.error_handlers import register_exception_handlers


def create_app(auth_service: AuthService | None = None, deadline_seconds: float | None = None) -> FastAPI:
    app = FastAPI(title="Session auth")
    app.state.session_protocol = SessionProtocol(
        auth_service or LocalAuthService(),
        deadline_seconds=deadline_seconds,
    )

    app.include_router(auth_router)
    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok"}

    return app


def main() -> None:
    import uvicorn

    uvicorn.run(
        "src.main:create_app",
        factory=True,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
