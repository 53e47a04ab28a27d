"""Auth Schemas — registration and login bodies.

Invariants:
    - email is stripped and lower-cased before lookup or insert
    - password is required and never echoed back
"""

from pydantic import BaseModel, Field, field_validator


def _normalize_email(v: str) -> str:
    v = v.strip().lower()
    if "@" not in v:
        raise ValueError("email must contain '@'")
    return v


class RegisterRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=128)
    name: str | None = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class AuthResult(BaseModel):
    user_id: int
