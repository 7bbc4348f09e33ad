"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.entities import User
from app.domain.rules import CustomEvaluatorRegistry, custom_evaluators
from app.infrastructure.security import decode_access_token, user_from_claims

bearer_scheme = HTTPBearer(auto_error=False)


def resolve_current_user(token: str) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        return user_from_claims(decode_access_token(token))
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> User:
    """Return the authenticated user from the bearer token."""

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return resolve_current_user(credentials.credentials)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user has administrator privileges."""

    if not current_user.is_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized",
        )
    return current_user


def get_custom_evaluators() -> CustomEvaluatorRegistry:
    """Return the registry consulted for ``custom`` rules."""

    return custom_evaluators
