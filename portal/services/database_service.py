# /portal/services/database_service.py

"""
A single facade over the per-aggregate SQL repositories. Services and
routers depend on `DatabaseService` only, never on the repositories or on the
SQLAlchemy session directly, which keeps them trivial to mock in tests.
"""

from typing import Dict, Generator, List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from portal.db.database import get_db
from portal.db.models.student_models import StudentStatus
from portal.db.models.timetable_models import CourseRequestStatus

# --- Repository Imports ---
from .database_helpers.academic_repository_sql import AcademicRepositorySQL
from .database_helpers.student_repository_sql import StudentRepositorySQL
from .database_helpers.timetable_repository_sql import TimetableRepositorySQL
from .database_helpers.user_repository_sql import UserRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        self.user_repo = UserRepositorySQL(db_session)
        self.academic_repo = AcademicRepositorySQL(db_session)
        self.student_repo = StudentRepositorySQL(db_session)
        self.timetable_repo = TimetableRepositorySQL(db_session)

    # --- USER METHODS (DELEGATED) ---
    def get_user_by_id(self, user_id: int): return self.user_repo.get_user_by_id(user_id)
    def get_user_by_email(self, email: str): return self.user_repo.get_user_by_email(email)
    def add_user(self, record: Dict): return self.user_repo.add_user(record)

    # --- ACADEMIC CATALOGUE METHODS (DELEGATED) ---
    def get_all_programs(self) -> List: return self.academic_repo.get_all_programs()
    def get_program_by_id(self, program_id: int): return self.academic_repo.get_program_by_id(program_id)
    def add_program(self, record: Dict): return self.academic_repo.add_program(record)
    def get_majors(self, program_id: Optional[int] = None) -> List: return self.academic_repo.get_majors(program_id)
    def get_major_by_id(self, major_id: int): return self.academic_repo.get_major_by_id(major_id)
    def add_major(self, record: Dict): return self.academic_repo.add_major(record)
    def get_sections(self, major_id: Optional[int] = None) -> List: return self.academic_repo.get_sections(major_id)
    def get_section_by_id(self, section_id: int): return self.academic_repo.get_section_by_id(section_id)
    def add_section(self, record: Dict): return self.academic_repo.add_section(record)
    def get_course_by_id(self, course_id: int): return self.academic_repo.get_course_by_id(course_id)
    def add_course(self, record: Dict): return self.academic_repo.add_course(record)

    # --- STUDENT METHODS (DELEGATED) ---
    def get_student_by_id(self, student_id: int): return self.student_repo.get_student_by_id(student_id)
    def get_student_by_roll_number(self, roll_number: str): return self.student_repo.get_student_by_roll_number(roll_number)
    def get_student_by_email(self, email: str): return self.student_repo.get_student_by_email(email)
    def get_all_students(self, status: Optional[StudentStatus] = None) -> List: return self.student_repo.get_all_students(status)
    def get_students_by_section_id(self, section_id: int) -> List: return self.student_repo.get_students_by_section_id(section_id)
    def add_student(self, record: Dict): return self.student_repo.add_student(record)
    def update_student_status(self, student_id: int, status: StudentStatus): return self.student_repo.update_student_status(student_id, status)
    def get_students_for_instructor(self, instructor_id: int) -> List[Dict]: return self.student_repo.get_students_for_instructor(instructor_id)

    # --- COURSE REQUEST & TIMETABLE METHODS (DELEGATED) ---
    def get_course_requests(self, status: Optional[CourseRequestStatus] = None, instructor_id: Optional[int] = None) -> List:
        return self.timetable_repo.get_course_requests(status=status, instructor_id=instructor_id)
    def get_course_request_by_id(self, request_id: int): return self.timetable_repo.get_course_request_by_id(request_id)
    def find_open_course_request(self, course_id: int, section_id: int): return self.timetable_repo.find_open_course_request(course_id, section_id)
    def add_course_request(self, record: Dict): return self.timetable_repo.add_course_request(record)
    def update_course_request(self, request_id: int, data: Dict): return self.timetable_repo.update_course_request(request_id, data)
    def get_timetable_entries(self, teacher_id: Optional[int] = None, section_id: Optional[int] = None) -> List:
        return self.timetable_repo.get_timetable_entries(teacher_id=teacher_id, section_id=section_id)
    def find_conflicting_entry(self, day_of_week: str, start_time: str, end_time: str, teacher_id: int, section_id: int):
        return self.timetable_repo.find_conflicting_entry(day_of_week, start_time, end_time, teacher_id, section_id)
    def add_timetable_entry(self, record: Dict): return self.timetable_repo.add_timetable_entry(record)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a request-scoped DatabaseService."""
    yield DatabaseService(db_session=db)
