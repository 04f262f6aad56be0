# /portal/routers/timetable_router.py

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ..core.deps import get_current_active_user, require_admin, require_instructor
from ..core.exceptions import PortalError, to_http_exception
from ..db.models.timetable_models import CourseRequestStatus
from ..db.models.user_model import User
from ..models import timetable_model
from ..services import timetable_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- COURSE REQUEST ENDPOINTS (/api/timetable/course-requests) ---

@router.get("/course-requests", response_model=timetable_model.CourseRequestList, summary="List Course Requests")
def get_course_requests(
    status_filter: Optional[CourseRequestStatus] = Query(default=None, alias="status"),
    instructor_id: Optional[int] = Query(default=None),
    db: DatabaseService = Depends(get_db_service),
    _user: User = Depends(get_current_active_user)
):
    requests = timetable_service.list_course_requests(db, status=status_filter, instructor_id=instructor_id)
    return {"requests": requests}

@router.post("/course-requests", response_model=timetable_model.CourseRequest, status_code=status.HTTP_201_CREATED, summary="Open a Course Request")
def create_course_request(
    request_create: timetable_model.CourseRequestCreate,
    db: DatabaseService = Depends(get_db_service),
    _admin: User = Depends(require_admin)
):
    try:
        return timetable_service.create_course_request(db, request_create)
    except PortalError as e:
        raise to_http_exception(e)

@router.post("/course-requests/{request_id}/accept", response_model=timetable_model.CourseRequest, summary="Accept a Course Request")
def accept_course_request(request_id: int, db: DatabaseService = Depends(get_db_service), instructor: User = Depends(require_instructor)):
    try:
        return timetable_service.accept_course_request(db, request_id, instructor)
    except PortalError as e:
        raise to_http_exception(e)

@router.post("/course-requests/{request_id}/reject", response_model=timetable_model.CourseRequest, summary="Reject a Course Request")
def reject_course_request(request_id: int, db: DatabaseService = Depends(get_db_service), instructor: User = Depends(require_instructor)):
    try:
        return timetable_service.reject_course_request(db, request_id, instructor)
    except PortalError as e:
        raise to_http_exception(e)

# --- TIMETABLE ENDPOINTS (/api/timetable) ---

@router.get("", response_model=timetable_model.TimetableList, summary="Get Timetable Entries")
def get_timetable(
    teacher_id: Optional[int] = Query(default=None),
    section_id: Optional[int] = Query(default=None),
    db: DatabaseService = Depends(get_db_service),
    _user: User = Depends(get_current_active_user)
):
    return {"timetable": timetable_service.list_timetable(db, teacher_id=teacher_id, section_id=section_id)}

@router.post("", response_model=timetable_model.TimetableEntry, status_code=status.HTTP_201_CREATED, summary="Schedule a Class")
def create_timetable_entry(
    entry_create: timetable_model.TimetableEntryCreate,
    db: DatabaseService = Depends(get_db_service),
    _admin: User = Depends(require_admin)
):
    try:
        return timetable_service.create_timetable_entry(db, entry_create)
    except PortalError as e:
        raise to_http_exception(e)
