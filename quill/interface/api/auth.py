"""Request authentication helpers.

Routes call these with the credentials FastAPI extracted from the request.
A token is read from the ``Authorization: Bearer`` header first and from
the ``auth_token`` cookie second.
"""

from fastapi import HTTPException, status

from quill.domain.service import JWTService
from quill.domain.value import Principal


def extract_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the bearer token from the header, falling back to the cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token or None


def require_principal(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
    action: str,
) -> Principal:
    """Authenticate the caller.

    Args:
        jwt_service: JWT service for token verification
        authorization: Authorization header value
        auth_token: Token cookie value
        action: What the caller is trying to do (for the error message)

    Returns:
        The caller's principal

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    principal = jwt_service.get_principal_or_none(
        extract_token(authorization, auth_token)
    )
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return principal


def require_permission(principal: Principal, permission: str) -> None:
    """Reject callers without ``permission``.

    Raises:
        HTTPException: 403 if the permission is missing
    """
    if not principal.has_permission(permission):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Missing permission: {permission}",
        )
