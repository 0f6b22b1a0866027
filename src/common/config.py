import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    jwt_secret: str
    jwt_algorithm: str
    access_token_lifespan_minutes: int
    refresh_token_lifespan_minutes: int
    session_deadline_seconds: float

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            jwt_secret=os.getenv("JWT_SECRET", "CHANGE_ME_DEV_ONLY"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            access_token_lifespan_minutes=int(os.getenv("ACCESS_TOKEN_LIFESPAN_MINUTES", "15")),
            refresh_token_lifespan_minutes=int(os.getenv("REFRESH_TOKEN_LIFESPAN_MINUTES", str(7 * 24 * 60))),
            session_deadline_seconds=float(os.getenv("SESSION_DEADLINE_SECONDS", "100")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
