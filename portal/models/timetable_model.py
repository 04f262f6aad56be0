# /portal/models/timetable_model.py

import enum
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from ..db.models.timetable_models import CourseRequestStatus

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class DayOfWeek(str, enum.Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


# --- Course requests ---

class CourseRequestCreate(BaseModel):
    """Opens a pending request asking an instructor to teach a course to a section."""
    course_id: int
    section_id: int


class CourseRequest(BaseModel):
    id: int
    course_id: int
    course_code: str
    course_name: str
    section_id: int
    section_name: str
    instructor_id: Optional[int] = None
    status: CourseRequestStatus
    created_at: Optional[datetime] = None


class CourseRequestList(BaseModel):
    requests: List[CourseRequest]


# --- Timetable ---

class TimetableEntryCreate(BaseModel):
    course_id: int
    section_id: int
    teacher_id: int
    day_of_week: DayOfWeek
    start_time: str = Field(..., pattern=TIME_PATTERN, examples=["09:00"])
    end_time: str = Field(..., pattern=TIME_PATTERN, examples=["10:30"])
    room: Optional[str] = None

    @model_validator(mode="after")
    def _end_after_start(self):
        # Zero-padded "HH:MM" strings order the same way as the times they encode.
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be later than start_time")
        return self


class TimetableEntry(BaseModel):
    id: int
    course_id: int
    course_code: str
    course_name: str
    section_id: int
    section_name: str
    teacher_id: int
    teacher_name: str
    day_of_week: DayOfWeek
    start_time: str
    end_time: str
    room: Optional[str] = None


class TimetableList(BaseModel):
    timetable: List[TimetableEntry]
