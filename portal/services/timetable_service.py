# /portal/services/timetable_service.py

"""
Business logic for course requests and the timetable.

Course request lifecycle: an admin opens a request (course + section), it
stays `pending` until an instructor accepts it (and becomes its owner) or
rejects it. Both outcomes are final. Only the owner of an accepted request
may be scheduled to teach that course to that section.
"""

import logging
from typing import Dict, List, Optional

from ..core.exceptions import (
    DuplicateRecordError,
    InvalidReferenceError,
    InvalidStateError,
    RecordNotFoundError,
)
from ..db.models.timetable_models import CourseRequestStatus
from ..db.models.user_model import User, UserRole
from ..models.timetable_model import CourseRequestCreate, DayOfWeek, TimetableEntryCreate
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

DAY_ORDER = {day.value: index for index, day in enumerate(DayOfWeek)}


# --- Serialization helpers ---

def serialize_course_request(request) -> Dict:
    return {
        "id": request.id,
        "course_id": request.course_id,
        "course_code": request.course.code,
        "course_name": request.course.name,
        "section_id": request.section_id,
        "section_name": request.section.name,
        "instructor_id": request.instructor_id,
        "status": request.status,
        "created_at": request.created_at,
    }


def serialize_timetable_entry(entry) -> Dict:
    return {
        "id": entry.id,
        "course_id": entry.course_id,
        "course_code": entry.course.code,
        "course_name": entry.course.name,
        "section_id": entry.section_id,
        "section_name": entry.section.name,
        "teacher_id": entry.teacher_id,
        "teacher_name": entry.teacher.name,
        "day_of_week": entry.day_of_week,
        "start_time": entry.start_time,
        "end_time": entry.end_time,
        "room": entry.room,
    }


def sort_week(entries: List[Dict]) -> List[Dict]:
    """Monday-first, then by start time."""
    return sorted(entries, key=lambda e: (DAY_ORDER.get(e["day_of_week"], len(DAY_ORDER)), e["start_time"]))


# --- Course requests ---

def list_course_requests(
    db: DatabaseService,
    status: Optional[CourseRequestStatus] = None,
    instructor_id: Optional[int] = None
) -> List[Dict]:
    requests = db.get_course_requests(status=status, instructor_id=instructor_id)
    return [serialize_course_request(r) for r in requests]


def create_course_request(db: DatabaseService, data: CourseRequestCreate) -> Dict:
    if not db.get_course_by_id(data.course_id):
        raise RecordNotFoundError("Course", data.course_id)
    if not db.get_section_by_id(data.section_id):
        raise RecordNotFoundError("Section", data.section_id)
    if db.find_open_course_request(data.course_id, data.section_id):
        raise DuplicateRecordError("CourseRequest", "course/section", f"{data.course_id}/{data.section_id}")

    new_request = db.add_course_request({
        "course_id": data.course_id,
        "section_id": data.section_id,
        "status": CourseRequestStatus.PENDING,
    })
    logger.info("Opened course request %s (course=%s, section=%s)", new_request.id, data.course_id, data.section_id)
    return serialize_course_request(new_request)


def _get_pending_request(db: DatabaseService, request_id: int):
    request = db.get_course_request_by_id(request_id)
    if request is None:
        raise RecordNotFoundError("CourseRequest", request_id)
    if request.status != CourseRequestStatus.PENDING:
        raise InvalidStateError(f"Course request {request_id} is already {request.status.value}")
    return request


def accept_course_request(db: DatabaseService, request_id: int, instructor: User) -> Dict:
    _get_pending_request(db, request_id)
    updated = db.update_course_request(request_id, {
        "status": CourseRequestStatus.ACCEPTED,
        "instructor_id": instructor.id,
    })
    logger.info("Instructor %s accepted course request %s", instructor.id, request_id)
    return serialize_course_request(updated)


def reject_course_request(db: DatabaseService, request_id: int, instructor: User) -> Dict:
    _get_pending_request(db, request_id)
    updated = db.update_course_request(request_id, {"status": CourseRequestStatus.REJECTED})
    logger.info("Instructor %s rejected course request %s", instructor.id, request_id)
    return serialize_course_request(updated)


# --- Timetable ---

def list_timetable(
    db: DatabaseService,
    teacher_id: Optional[int] = None,
    section_id: Optional[int] = None
) -> List[Dict]:
    entries = db.get_timetable_entries(teacher_id=teacher_id, section_id=section_id)
    return sort_week([serialize_timetable_entry(e) for e in entries])


def create_timetable_entry(db: DatabaseService, data: TimetableEntryCreate) -> Dict:
    """
    Schedules one class occurrence. The teacher must own an accepted request
    for this course and section, and neither the teacher nor the section may
    already have an overlapping class on that day.
    """
    if not db.get_course_by_id(data.course_id):
        raise RecordNotFoundError("Course", data.course_id)
    if not db.get_section_by_id(data.section_id):
        raise RecordNotFoundError("Section", data.section_id)
    teacher = db.get_user_by_id(data.teacher_id)
    if teacher is None or teacher.role not in (UserRole.INSTRUCTOR, UserRole.ADMIN):
        raise RecordNotFoundError("Instructor", data.teacher_id)

    accepted = db.get_course_requests(status=CourseRequestStatus.ACCEPTED, instructor_id=data.teacher_id)
    if not any(r.course_id == data.course_id and r.section_id == data.section_id for r in accepted):
        raise InvalidReferenceError(
            f"Instructor {data.teacher_id} has no accepted request for course "
            f"{data.course_id} in section {data.section_id}"
        )

    day = data.day_of_week.value
    conflict = db.find_conflicting_entry(day, data.start_time, data.end_time, data.teacher_id, data.section_id)
    if conflict is not None:
        raise InvalidStateError(
            f"Overlaps timetable entry {conflict.id} on {day} "
            f"({conflict.start_time}-{conflict.end_time})"
        )

    record = data.model_dump()
    record["day_of_week"] = day
    new_entry = db.add_timetable_entry(record)
    logger.info("Scheduled entry %s for teacher %s on %s %s-%s",
                new_entry.id, data.teacher_id, day, data.start_time, data.end_time)
    return serialize_timetable_entry(new_entry)
