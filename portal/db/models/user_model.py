# /portal/db/models/user_model.py

"""
SQLAlchemy model for the authenticated principal (a portal login account).
"""

import enum

from sqlalchemy import Boolean, Column, Enum, Integer, String
from sqlalchemy.orm import relationship

from ..base_class import Base


class UserRole(str, enum.Enum):
    STUDENT = "student"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


def enum_values(enum_cls):
    """Persist an Enum by its value ('pending'), not its member name ('PENDING')."""
    return [member.value for member in enum_cls]


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(
        Enum(UserRole, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        default=UserRole.STUDENT,
    )
    is_active = Column(Boolean, nullable=False, default=True)

    # Course requests this user has accepted, and the classes they teach.
    course_requests = relationship("CourseRequest", back_populates="instructor")
    timetable_entries = relationship("TimetableEntry", back_populates="teacher")
