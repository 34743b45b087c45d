"""FastAPI dependency resolving the caller from a bearer credential."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from identity.user.tokens import TokenClaims, decode_token
from shared.errors import AuthError

# auto_error=False so a missing header becomes our 401 instead of FastAPI's 403
_bearer = HTTPBearer(auto_error=False)


def require_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> TokenClaims:
    if credentials is None or not credentials.credentials:
        raise AuthError("Access token required")
    return decode_token(credentials.credentials)
