# /portal/db/models/timetable_models.py

"""
SQLAlchemy models for course requests and the timetable.

A CourseRequest offers a Course to a Section. It starts `pending` with no
instructor; an instructor accepting it becomes its owner. TimetableEntry rows
are the scheduled class occurrences of an accepted course.
"""

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..base_class import Base
from .student_models import utcnow
from .user_model import enum_values


class CourseRequestStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class CourseRequest(Base):
    __tablename__ = "course_requests"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False)
    instructor_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    status = Column(
        Enum(CourseRequestStatus, native_enum=False, length=20, values_callable=enum_values),
        nullable=False,
        default=CourseRequestStatus.PENDING,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    course = relationship("Course")
    section = relationship("Section")
    instructor = relationship("User", back_populates="course_requests")


class TimetableEntry(Base):
    __tablename__ = "timetable_entries"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False, index=True)
    teacher_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    day_of_week = Column(String, nullable=False)
    start_time = Column(String, nullable=False)  # "HH:MM", 24h
    end_time = Column(String, nullable=False)
    room = Column(String, nullable=True)

    course = relationship("Course")
    section = relationship("Section")
    teacher = relationship("User", back_populates="timetable_entries")
