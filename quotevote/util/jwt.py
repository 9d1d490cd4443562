"""Bearer tokens: HS256 JWTs naming the authenticated username."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from quotevote.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a bearer token."""

    username: str
    exp: datetime


class JWTError(Exception):
    """The token is malformed, forged or expired."""

    pass


def create_token(username: str, settings: AuthSettings) -> str:
    """Sign a token for ``username`` valid for ``jwt_expiry_hours``.

    Args:
        username: Username the token vouches for
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    claims = TokenPayload(
        username=username,
        exp=datetime.now(timezone.utc) + timedelta(hours=settings.jwt_expiry_hours),
    )
    return jwt.encode(
        claims.model_dump(), settings.jwt_secret, algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then return the claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "username"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
    return TokenPayload.model_validate(claims)
