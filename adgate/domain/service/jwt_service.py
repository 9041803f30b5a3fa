"""Session token domain service."""

import logfire

from adgate.config import AuthSettings
from adgate.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, identity_id: str, name: str) -> str:
        """Create session token for an identity.

        Args:
            identity_id: Identity ID
            name: Identity display name

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", identity_id=identity_id):
            token = create_token(identity_id, name, self.auth_settings)
            logfire.info("Session token created", identity_id=identity_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify session token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("Session token verified", identity_id=payload.identity_id)
                return payload
            except Exception as e:
                logfire.warn("Session token verification failed", error=str(e))
                raise
