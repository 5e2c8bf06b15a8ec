"""FastAPI dependencies for bearer-token authentication."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.exceptions import TokenError
from app.providers import TokenSvc
from app.schemas.auth import TokenUser

# tokenUrl is only used by Swagger UI's "Authorize" dialog
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")

BearerToken = Annotated[str, Depends(oauth2_scheme)]


async def get_current_user(token: BearerToken, tokens: TokenSvc) -> TokenUser:
    """Verify the bearer token and return the identity it carries."""
    try:
        return await tokens.verify(token)
    except TokenError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.detail,
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


# Convenience type alias
CurrentUser = Annotated[TokenUser, Depends(get_current_user)]
