"""Bearer credential extraction for protected routes."""

from typing import Optional

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Missing credentials are rejected by JWTService, not by the scheme
bearer_scheme = HTTPBearer(auto_error=False)


def bearer_token(credentials: Optional[HTTPAuthorizationCredentials]) -> Optional[str]:
    """Raw token from an ``Authorization: Bearer`` header, if any."""
    if credentials is None:
        return None
    return credentials.credentials
