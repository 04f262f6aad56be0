# /portal/db/models/student_models.py

"""
SQLAlchemy model for a registered student. Students are not login accounts:
they register publicly and look up their timetable by roll number.
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..base_class import Base
from .user_model import enum_values


class StudentStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    GRADUATED = "graduated"


def utcnow():
    return datetime.now(timezone.utc)


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    roll_number = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)

    program_id = Column(Integer, ForeignKey("programs.id"), nullable=False)
    major_id = Column(Integer, ForeignKey("majors.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False, index=True)

    status = Column(
        Enum(StudentStatus, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        default=StudentStatus.ACTIVE,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    program = relationship("Program")
    major = relationship("Major")
    section = relationship("Section", back_populates="students")
