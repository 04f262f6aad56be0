# /tests/test_services.py

import pytest
from unittest.mock import MagicMock
from types import SimpleNamespace

from portal.core.exceptions import (
    DuplicateRecordError,
    InvalidReferenceError,
    InvalidStateError,
    RecordNotFoundError,
)
from portal.db.models.student_models import StudentStatus
from portal.db.models.timetable_models import CourseRequestStatus
from portal.db.models.user_model import UserRole
from portal.models.student_model import StudentCreate
from portal.models.timetable_model import TimetableEntryCreate
from portal.services import dashboard_service, student_service, timetable_service


@pytest.fixture
def mock_db_service():
    """Provides a mock of the DatabaseService for dependency injection."""
    return MagicMock()


@pytest.fixture
def student_data():
    return StudentCreate(
        name="Alice Doe", email="Alice@Example.edu", roll_number=" cs-001 ",
        program_id=1, major_id=2, section_id=3,
    )


def wire_chain(db, major_program=1, section_major=2):
    db.get_program_by_id.return_value = SimpleNamespace(id=1)
    db.get_major_by_id.return_value = SimpleNamespace(id=2, program_id=major_program)
    db.get_section_by_id.return_value = SimpleNamespace(id=3, major_id=section_major)


# --- Student registration ---

def test_register_student_normalizes_identifiers(mock_db_service, student_data):
    wire_chain(mock_db_service)
    mock_db_service.get_student_by_roll_number.return_value = None
    mock_db_service.get_student_by_email.return_value = None
    mock_db_service.add_student.return_value = SimpleNamespace(id=11)

    student_service.register_student(mock_db_service, student_data)

    record = mock_db_service.add_student.call_args.args[0]
    assert record["roll_number"] == "CS-001"
    assert record["email"] == "alice@example.edu"
    assert record["status"] == StudentStatus.ACTIVE


def test_register_student_rejects_mismatched_section(mock_db_service, student_data):
    wire_chain(mock_db_service, section_major=99)
    with pytest.raises(InvalidReferenceError):
        student_service.register_student(mock_db_service, student_data)
    mock_db_service.add_student.assert_not_called()


def test_register_student_rejects_duplicate_email(mock_db_service, student_data):
    wire_chain(mock_db_service)
    mock_db_service.get_student_by_roll_number.return_value = None
    mock_db_service.get_student_by_email.return_value = SimpleNamespace(id=5)
    with pytest.raises(DuplicateRecordError) as excinfo:
        student_service.register_student(mock_db_service, student_data)
    assert excinfo.value.details["field"] == "email"


def test_update_status_of_unknown_student(mock_db_service):
    mock_db_service.update_student_status.return_value = None
    with pytest.raises(RecordNotFoundError):
        student_service.update_student_status(mock_db_service, 42, StudentStatus.SUSPENDED)


# --- Course requests ---

def test_accept_requires_pending_request(mock_db_service):
    mock_db_service.get_course_request_by_id.return_value = SimpleNamespace(status=CourseRequestStatus.REJECTED)
    with pytest.raises(InvalidStateError):
        timetable_service.accept_course_request(mock_db_service, 1, SimpleNamespace(id=7))
    mock_db_service.update_course_request.assert_not_called()


def test_reject_does_not_assign_instructor(mock_db_service):
    mock_db_service.get_course_request_by_id.return_value = SimpleNamespace(status=CourseRequestStatus.PENDING)
    mock_db_service.update_course_request.return_value = MagicMock(status=CourseRequestStatus.REJECTED)

    timetable_service.reject_course_request(mock_db_service, 1, SimpleNamespace(id=7))

    mock_db_service.update_course_request.assert_called_once_with(1, {"status": CourseRequestStatus.REJECTED})


# --- Timetable ---

def test_sort_week_is_monday_first():
    entries = [
        {"day_of_week": "Friday", "start_time": "08:00"},
        {"day_of_week": "Monday", "start_time": "13:00"},
        {"day_of_week": "Monday", "start_time": "09:00"},
    ]
    ordered = timetable_service.sort_week(entries)
    assert [(e["day_of_week"], e["start_time"]) for e in ordered] == [
        ("Monday", "09:00"), ("Monday", "13:00"), ("Friday", "08:00"),
    ]


def test_schedule_rejects_non_instructor_teacher(mock_db_service):
    mock_db_service.get_user_by_id.return_value = SimpleNamespace(id=3, role=UserRole.STUDENT)
    data = TimetableEntryCreate(
        course_id=1, section_id=1, teacher_id=3, day_of_week="Monday", start_time="09:00", end_time="10:00",
    )
    with pytest.raises(RecordNotFoundError):
        timetable_service.create_timetable_entry(mock_db_service, data)
    mock_db_service.add_timetable_entry.assert_not_called()


# --- Dashboard summary ---

def test_instructor_summary_counts(mock_db_service):
    def course_requests(status=None, instructor_id=None):
        return [object()] * (3 if status == CourseRequestStatus.PENDING else 1)

    mock_db_service.get_course_requests.side_effect = course_requests
    mock_db_service.get_timetable_entries.return_value = [object(), object()]
    mock_db_service.get_students_for_instructor.return_value = []

    summary = dashboard_service.get_instructor_summary(mock_db_service, 7)

    assert summary.pendingRequests == 3
    assert summary.acceptedCourses == 1
    assert summary.totalClasses == 2
    assert summary.enrolledStudentCount == 0
    mock_db_service.get_timetable_entries.assert_called_once_with(teacher_id=7)


def test_instructor_summary_reraises_and_logs(mock_db_service, caplog):
    mock_db_service.get_course_requests.side_effect = RuntimeError("database is down")
    with pytest.raises(RuntimeError):
        dashboard_service.get_instructor_summary(mock_db_service, 7)
    assert "Failed to calculate dashboard summary" in caplog.text
