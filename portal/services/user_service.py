# /portal/services/user_service.py

"""
Business logic for portal accounts: registration and password login.
"""

import logging
from typing import Optional

from ..core import security
from ..core.exceptions import DuplicateRecordError
from ..db.models.user_model import User
from ..models.user_model import UserCreate
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def create_user(db: DatabaseService, user: UserCreate) -> User:
    """
    Creates a new account. Emails are compared case-insensitively, so they
    are stored lower-cased.
    """
    email = user.email.lower()
    if db.get_user_by_email(email):
        raise DuplicateRecordError("User", "email", email)

    record = {
        "name": user.name,
        "email": email,
        "hashed_password": security.get_password_hash(user.password),
        "role": user.role,
        "is_active": True,
    }
    new_user = db.add_user(record)
    logger.info("Registered user %s with role %s", new_user.id, new_user.role.value)
    return new_user


def authenticate_user(db: DatabaseService, email: str, password: str) -> Optional[User]:
    """Returns the user for a valid email/password pair, otherwise None."""
    user = db.get_user_by_email(email.lower())
    if not user or not security.verify_password(password, user.hashed_password):
        logger.info("Failed login attempt")
        return None
    return user
