# /portal/models/user_model.py

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from ..db.models.user_model import UserRole


class UserBase(BaseModel):
    name: str = Field(..., min_length=2, description="Display name of the account holder.")
    email: EmailStr = Field(..., description="Login email, unique across the portal.")


class UserCreate(UserBase):
    """
    Self-service registration payload. Admin accounts cannot be created
    through the public endpoint.
    """
    password: str = Field(..., min_length=8)
    role: UserRole = Field(default=UserRole.STUDENT)

    @field_validator("role")
    @classmethod
    def _no_self_service_admin(cls, v: UserRole) -> UserRole:
        if v == UserRole.ADMIN:
            raise ValueError("Admin accounts cannot be self-registered.")
        return v


class User(UserBase):
    """The principal as returned by the API (never includes the password hash)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    role: UserRole
    is_active: bool = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
