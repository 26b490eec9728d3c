"""Authentication helpers for routes."""

from fastapi import HTTPException, status

from stackit.domain.service import JWTService
from stackit.domain.value import Actor


def require_actor(jwt_service: JWTService, auth_token: str | None, action: str) -> Actor:
    """Resolve the authenticated actor or reject the request.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from the ``auth_token`` cookie
        action: What the caller is trying to do, for the error message

    Returns:
        The authenticated actor

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return actor
