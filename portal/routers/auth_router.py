# /portal/routers/auth_router.py

"""
This module defines the public-facing API for all authentication-related actions.

It includes endpoints for:
- User registration (`/register`)
- User login and token generation (`/token`)
- Retrieving the current user's profile (`/me`)
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

# --- Application-specific Imports ---
from ..core import security
from ..core.deps import get_current_active_user
from ..core.exceptions import DuplicateRecordError, to_http_exception
from ..db.models.user_model import User as UserModel
from ..models.user_model import Token, User, UserCreate
from ..services import user_service
from ..services.database_service import DatabaseService, get_db_service

# --- Router Initialization ---
router = APIRouter()


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED, summary="Register an Account")
def register_user(user_in: UserCreate, db: DatabaseService = Depends(get_db_service)):
    """
    Handles new account registration. The router does not know the business
    rules; it calls the service and translates its errors.
    """
    try:
        return user_service.create_user(db=db, user=user_in)
    except DuplicateRecordError as e:
        raise to_http_exception(e)


@router.post("/token", response_model=Token, summary="Log In")
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: DatabaseService = Depends(get_db_service)
):
    """
    Handles user login, compatible with the OAuth2 Password Flow. The email
    travels in the form's 'username' field.
    """
    user = user_service.authenticate_user(db, email=form_data.username, password=form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")

    access_token = security.create_access_token(subject=user.id, role=user.role.value)
    return Token(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=User, summary="Get the Current Principal")
def read_current_user(current_user: UserModel = Depends(get_current_active_user)):
    """Protected endpoint: profile of the authenticated principal."""
    return current_user
