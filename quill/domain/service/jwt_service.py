"""JWT token domain service."""

import logfire

from quill.config import AuthSettings
from quill.domain.value import Principal, UserId
from quill.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self,
        user_id: int,
        roles: list[str] | None = None,
        permissions: list[str] | None = None,
    ) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            roles: Role names held by the user
            permissions: Permission names granted to the user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(
                user_id, roles or [], permissions or [], self.auth_settings
            )
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

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
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_principal(self, token: str) -> Principal:
        """Verify a token and build the caller's principal.

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.verify_token(token)
        return Principal(
            user_id=UserId(payload.user_id),
            roles=frozenset(payload.roles),
            permissions=frozenset(payload.permissions),
            super_admin_role=self.auth_settings.super_admin_role,
        )

    def get_principal_or_none(self, token: str | None) -> Principal | None:
        """Build the caller's principal without raising.

        Convenience for routes where authentication is optional.

        Args:
            token: JWT token string (optional)

        Returns:
            Principal if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.get_principal(token)
        except JWTError as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
