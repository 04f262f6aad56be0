# /portal/routers/students_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import StreamingResponse

from ..core.deps import require_admin, require_instructor
from ..core.exceptions import PortalError, to_http_exception
from ..db.models.student_models import StudentStatus
from ..db.models.user_model import User
from ..models import academic_model, student_model
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- PUBLIC REGISTRATION ENDPOINTS (no auth required) ---

@router.post("/register", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Register a Student")
def register_student(student_create: student_model.StudentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.register_student(db=db, student_data=student_create)
    except PortalError as e:
        raise to_http_exception(e)

@router.get("/programs", response_model=academic_model.ProgramList, summary="List Programs")
def get_programs(db: DatabaseService = Depends(get_db_service)):
    return {"programs": student_service.get_programs(db)}

@router.get("/majors", response_model=academic_model.MajorList, summary="List Majors")
def get_majors(program_id: Optional[int] = Query(default=None), db: DatabaseService = Depends(get_db_service)):
    return {"majors": student_service.get_majors(db, program_id=program_id)}

@router.get("/sections", response_model=academic_model.SectionList, summary="List Sections")
def get_sections(major_id: Optional[int] = Query(default=None), db: DatabaseService = Depends(get_db_service)):
    return {"sections": student_service.get_sections(db, major_id=major_id)}

# --- PUBLIC ROLL-NUMBER LOOKUPS (timetable access) ---

@router.get("/roll/{roll_number}", response_model=student_model.Student, summary="Get a Student by Roll Number")
def get_student_by_roll_number(roll_number: str, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.get_student_by_roll_number(db, roll_number)
    except PortalError as e:
        raise to_http_exception(e)

@router.get("/roll/{roll_number}/timetable", response_model=student_model.StudentTimetable, summary="Get a Student's Timetable")
def get_student_timetable(roll_number: str, db: DatabaseService = Depends(get_db_service)):
    try:
        return student_service.get_student_timetable(db, roll_number)
    except PortalError as e:
        raise to_http_exception(e)

# --- ADMIN-ONLY ENDPOINTS ---

@router.get("/list", response_model=student_model.StudentList, summary="List All Students")
def get_all_students(
    status_filter: Optional[StudentStatus] = Query(default=None, alias="status"),
    db: DatabaseService = Depends(get_db_service),
    _admin: User = Depends(require_admin)
):
    return {"students": student_service.get_all_students(db, status=status_filter)}

@router.get("/section/{section_id}", response_model=student_model.StudentList, summary="List Students of a Section")
def get_students_by_section(section_id: int, db: DatabaseService = Depends(get_db_service), _admin: User = Depends(require_admin)):
    try:
        return {"students": student_service.get_students_by_section(db, section_id)}
    except PortalError as e:
        raise to_http_exception(e)

@router.get("/section/{section_id}/export", summary="Export Section Roster as CSV", response_class=StreamingResponse)
def export_section_roster_csv(section_id: int, db: DatabaseService = Depends(get_db_service), _admin: User = Depends(require_admin)):
    try:
        csv_string = student_service.export_section_roster_as_csv(db, section_id)
    except PortalError as e:
        raise to_http_exception(e)
    file_name = f"roster_section_{section_id}.csv"
    return StreamingResponse(iter([csv_string]), media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={file_name}"})

@router.patch("/{student_id}/status", response_model=student_model.Student, summary="Update a Student's Status")
def update_student_status(
    student_id: int,
    status_update: student_model.StudentStatusUpdate,
    db: DatabaseService = Depends(get_db_service),
    _admin: User = Depends(require_admin)
):
    try:
        return student_service.update_student_status(db, student_id, status_update.status)
    except PortalError as e:
        raise to_http_exception(e)

# --- INSTRUCTOR-ONLY ENDPOINTS ---

@router.get("/instructor-enrolled", response_model=student_model.EnrolledStudentList, summary="Students Enrolled in My Courses")
def get_students_for_instructor(db: DatabaseService = Depends(get_db_service), instructor: User = Depends(require_instructor)):
    return {"students": student_service.get_students_for_instructor(db, instructor.id)}
