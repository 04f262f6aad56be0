# /portal/models/student_model.py

# --- Core Imports ---
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from ..db.models.student_models import StudentStatus
from .timetable_model import TimetableEntry


# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains fields common to registration and
    read operations.
    """
    name: str = Field(..., min_length=2, description="The full name of the student.")
    email: EmailStr = Field(..., description="Contact email, unique per student.")
    roll_number: str = Field(..., min_length=1, description="The official roll number issued by the institution.")


class StudentCreate(StudentBase):
    """
    Public registration payload. The program, major and section must form a
    consistent chain (the section belongs to the major, the major to the
    program).
    """
    program_id: int
    major_id: int
    section_id: int


class Student(StudentBase):
    """
    The full representation of a Student resource, as it is stored in the
    database and returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    program_id: int
    major_id: int
    section_id: int
    status: StudentStatus = StudentStatus.ACTIVE
    created_at: Optional[datetime] = None


class StudentStatusUpdate(BaseModel):
    status: StudentStatus


class StudentList(BaseModel):
    students: List[Student] = Field(default_factory=list)


class StudentTimetable(BaseModel):
    """A student's record together with the schedule of their section."""
    student: Student
    timetable: List[TimetableEntry] = Field(default_factory=list)


class EnrolledStudentRow(BaseModel):
    """
    Denormalized projection of a student enrolled in one of an instructor's
    courses. A student taking two of the instructor's courses appears twice,
    so rows are identified by (id, course_code), not by id alone.
    """
    id: int
    roll_number: str
    name: str
    email: str
    course_code: str
    course_name: str
    section_name: str

    @property
    def row_key(self) -> tuple:
        return (self.id, self.course_code)


class EnrolledStudentList(BaseModel):
    # A response without a `students` key means "no students", never None.
    students: List[EnrolledStudentRow] = Field(default_factory=list)

    @field_validator("students", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return [] if v is None else v
