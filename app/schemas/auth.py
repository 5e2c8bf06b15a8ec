"""Pydantic schemas for authentication."""

from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    EmailStr,
    Field,
    ModelWrapValidatorHandler,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_core import InitErrorDetails, PydanticCustomError

from app.constants import (
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    PASSWORD_MIN_LENGTH,
)

_PASSWORD_MISMATCH = "The confirm password and password must match"


def _normalize_email(v: str) -> str:
    """Emails are the account key and compare case-insensitively."""
    return v.strip().lower()


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint."""

    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return _normalize_email(v)


class RegisterRequest(BaseModel):
    """Account details submitted to the register endpoint."""

    firstname: str = Field(..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    lastname: str = Field(..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    confirm_password: str

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v: str) -> str:
        v = _normalize_email(v)
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"The email may not be greater than {EMAIL_MAX_LENGTH} characters")
        return v

    @model_validator(mode="wrap")
    @classmethod
    def validate_passwords_match(
        cls, data: Any, handler: ModelWrapValidatorHandler["RegisterRequest"]
    ) -> "RegisterRequest":
        """``confirm_password`` must equal the submitted ``password``.

        Compared on the raw input, so the mismatch is reported together
        with every other field error, even when ``password`` itself is
        invalid.
        """
        mismatch: InitErrorDetails | None = None
        if (
            isinstance(data, dict)
            and "password" in data
            and "confirm_password" in data
            and data["password"] != data["confirm_password"]
        ):
            mismatch = {
                "type": PydanticCustomError("password_mismatch", _PASSWORD_MISMATCH),
                "loc": ("confirm_password",),
                "input": data["confirm_password"],
            }

        try:
            model = handler(data)
        except ValidationError as exc:
            if mismatch is None:
                raise
            line_errors: list[InitErrorDetails] = [
                {
                    "type": PydanticCustomError(err["type"], err["msg"]),
                    "loc": err["loc"],
                    "input": err["input"],
                }
                for err in exc.errors()
            ]
            raise ValidationError.from_exception_data(
                exc.title, [*line_errors, mismatch]
            ) from None

        if mismatch is not None:
            raise ValidationError.from_exception_data(cls.__name__, [mismatch])
        return model


class UserResponse(BaseModel):
    """Public user information. The password hash is never included."""

    id: str
    firstname: str
    lastname: str
    email: EmailStr
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class TokenUser(BaseModel):
    """Identity resolved from a verified bearer token. No DB query needed."""

    id: str
    email: str = ""
    jti: str
    expires_at: datetime


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    message: str = "Login successful"
    access_token: str


class RegisterResponse(BaseModel):
    """Response schema for a successful registration."""

    message: str = "User successfully registered"
    user: UserResponse


class TokenResponse(BaseModel):
    """Response schema for the refresh endpoint."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
