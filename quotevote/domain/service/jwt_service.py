"""Issues and checks the bearer tokens that identify voters."""

import logfire

from quotevote.config import AuthSettings
from quotevote.domain.error import UnauthorizedError
from quotevote.util.jwt import JWTError, create_token, verify_token

from .base import Service


class JWTService(Service):
    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, username: str) -> str:
        """Sign a token vouching for ``username``."""
        with logfire.span("jwt_service.create_token", username=username):
            return create_token(username, self.auth_settings)

    def verify_credential(self, token: str | None) -> str:
        """Resolve a bearer token to the username it vouches for.

        Args:
            token: Raw token from the Authorization header, if any

        Returns:
            Username carried by a valid, unexpired token

        Raises:
            UnauthorizedError: If the token is absent, forged or expired
        """
        if not token:
            raise UnauthorizedError("authentication required")

        with logfire.span("jwt_service.verify_credential"):
            try:
                claims = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Rejected bearer token", reason=str(e))
                raise UnauthorizedError(str(e)) from e
            return claims.username
