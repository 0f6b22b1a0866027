from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 64

class CredentialEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: EmailStr
    password: str

    @field_validator('password', mode='after')
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < PASSWORD_MIN_LENGTH or len(v) > PASSWORD_MAX_LENGTH:
            raise ValueError(
                f"password must be between {PASSWORD_MIN_LENGTH} and {PASSWORD_MAX_LENGTH} characters"
            )
        return v

class RefreshTokenEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    refresh_token: str

class TokenPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_token: str
    refresh_token: str

class AccountRef(BaseModel):
    user_id: int
    email: EmailStr

class MessageResponse(BaseModel):
    message: str
