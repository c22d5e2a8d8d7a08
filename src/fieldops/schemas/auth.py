from pydantic import BaseModel, Field

from src.fieldops.schemas.common import RequestModel
from src.fieldops.schemas.user import UserRead


class LoginRequest(RequestModel):
    # Not EmailStr: unknown or malformed addresses must fail like a bad password
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class LoginResponse(TokenResponse):
    user: UserRead
