# /portal/core/deps.py

"""
Authorization gates shared by the routers.

    get_current_active_user  - any authenticated, active account ("auth")
    require_admin            - role admin ("isAdmin")
    require_instructor       - role instructor or admin ("isInstructor")

Every gate runs before the endpoint body, so a rejected request never
reaches the service layer.
"""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from ..db.models.user_model import User, UserRole
from ..services.database_service import DatabaseService, get_db_service
from .security import decode_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


def _credentials_exception(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: DatabaseService = Depends(get_db_service)
) -> User:
    """Resolve the bearer token to a User row."""
    payload = decode_token(token)
    if payload is None or payload.get("type") != "access":
        raise _credentials_exception()

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise _credentials_exception("Invalid token payload")

    user = db.get_user_by_id(user_id)
    if user is None:
        raise _credentials_exception("User not found")
    return user


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")
    return current_user


def require_admin(current_user: User = Depends(get_current_active_user)) -> User:
    if current_user.role != UserRole.ADMIN:
        logger.info("Admin access denied for user %s (role=%s)", current_user.id, current_user.role.value)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user


def require_instructor(current_user: User = Depends(get_current_active_user)) -> User:
    if current_user.role not in (UserRole.INSTRUCTOR, UserRole.ADMIN):
        logger.info("Instructor access denied for user %s (role=%s)", current_user.id, current_user.role.value)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Instructor access required")
    return current_user
