"""Bearer credentials: signed JWTs carrying the user id and email.

Tokens are stateless: any context holding the signing secret can verify
them without reading the identity store.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from shared.errors import AuthError
from shared.settings import get_settings


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    email: str
    expires_at: datetime


def issue_token(user_id, email, now=None) -> str:
    """Sign a token for ``user_id`` valid for the configured number of days."""
    settings = get_settings()
    issued_at = now or datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "userId": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.TOKEN_TTL_DAYS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> TokenClaims:
    """Verify ``token`` and return its claims.

    Raises:
        AuthError: if the token is malformed, tampered with or expired.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as exc:
        raise AuthError("Invalid or expired token") from exc

    user_id = payload.get("userId") or payload.get("sub")
    if not user_id:
        raise AuthError("Invalid or expired token")

    return TokenClaims(
        user_id=str(user_id),
        email=payload.get("email", ""),
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )
