"""Domain errors raised by the auth flow and token service.

``AuthFlowError`` subclasses carry the HTTP status and response body key
they are rendered with by the handler registered in ``app.main``.  The
status codes for a wrong password (404) and a taken email (401) reproduce
the behaviour existing API clients depend on.
"""

from fastapi import status


class AuthFlowError(Exception):
    """Base class for errors surfaced as JSON by the auth endpoints."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    body_key: str = "message"
    detail: str = "Request could not be processed"

    def __init__(self, email: str, detail: str | None = None):
        self.email = email
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)

    def to_body(self) -> dict[str, str]:
        return {self.body_key: self.detail}


class UserNotFoundError(AuthFlowError):
    """No account is registered for the submitted email."""

    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "We can not find the user with that e-mail address"


class IncorrectPasswordError(AuthFlowError):
    """The account exists but the password does not match."""

    status_code = status.HTTP_404_NOT_FOUND
    body_key = "error"
    detail = "Incorrect password"


class EmailTakenError(AuthFlowError):
    """Registration attempted with an email that already has an account."""

    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "The email has already been taken"


class TokenError(Exception):
    """Base class for bearer-token failures."""

    detail = "Invalid or expired token"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class InvalidTokenError(TokenError):
    """Bad signature, malformed token, wrong type, or revoked ``jti``."""

    detail = "Invalid token"


class TokenExpiredError(TokenError):
    """Signature is valid but ``exp`` has passed."""

    detail = "Token has expired"
