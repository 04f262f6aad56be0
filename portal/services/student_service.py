# /portal/services/student_service.py

"""
This service module is the business logic layer for student registration,
the public catalogue lookups that registration needs, and the administrative
student queries.

Routers call these functions with a `DatabaseService`; every failure is a
domain exception from `portal.core.exceptions`, never an HTTP error.
"""

import logging
from typing import Dict, List, Optional

import pandas as pd

from ..core.exceptions import DuplicateRecordError, InvalidReferenceError, RecordNotFoundError
from ..db.models.student_models import StudentStatus
from ..models.student_model import StudentCreate
from . import timetable_service
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

ROSTER_COLUMNS = ['Roll Number', 'Name', 'Email', 'Status', 'Section']


# --- Public catalogue lookups ---

def get_programs(db: DatabaseService) -> List:
    return db.get_all_programs()


def get_majors(db: DatabaseService, program_id: Optional[int] = None) -> List:
    return db.get_majors(program_id=program_id)


def get_sections(db: DatabaseService, major_id: Optional[int] = None) -> List:
    return db.get_sections(major_id=major_id)


# --- Registration ---

def _validate_academic_chain(db: DatabaseService, student_data: StudentCreate) -> None:
    """The section must belong to the major, and the major to the program."""
    program = db.get_program_by_id(student_data.program_id)
    if program is None:
        raise RecordNotFoundError("Program", student_data.program_id)

    major = db.get_major_by_id(student_data.major_id)
    if major is None:
        raise RecordNotFoundError("Major", student_data.major_id)
    if major.program_id != program.id:
        raise InvalidReferenceError(f"Major {major.id} does not belong to program {program.id}")

    section = db.get_section_by_id(student_data.section_id)
    if section is None:
        raise RecordNotFoundError("Section", student_data.section_id)
    if section.major_id != major.id:
        raise InvalidReferenceError(f"Section {section.id} does not belong to major {major.id}")


def register_student(db: DatabaseService, student_data: StudentCreate):
    """
    Registers a new student after validating the program/major/section chain
    and the uniqueness of roll number and email.
    """
    roll_number = student_data.roll_number.strip().upper()
    email = student_data.email.lower()

    _validate_academic_chain(db, student_data)

    if db.get_student_by_roll_number(roll_number):
        raise DuplicateRecordError("Student", "roll_number", roll_number)
    if db.get_student_by_email(email):
        raise DuplicateRecordError("Student", "email", email)

    record = student_data.model_dump()
    record.update(roll_number=roll_number, email=email, status=StudentStatus.ACTIVE)
    new_student = db.add_student(record)
    logger.info("Registered student %s (roll %s)", new_student.id, roll_number)
    return new_student


# --- Lookups by roll number ---

def get_student_by_roll_number(db: DatabaseService, roll_number: str):
    student = db.get_student_by_roll_number(roll_number.strip().upper())
    if student is None:
        raise RecordNotFoundError("Student", roll_number)
    return student


def get_student_timetable(db: DatabaseService, roll_number: str) -> Dict:
    """The student's record plus the weekly schedule of their section."""
    student = get_student_by_roll_number(db, roll_number)
    timetable = timetable_service.list_timetable(db, section_id=student.section_id)
    return {"student": student, "timetable": timetable}


# --- Administrative queries ---

def get_all_students(db: DatabaseService, status: Optional[StudentStatus] = None) -> List:
    return db.get_all_students(status=status)


def get_students_by_section(db: DatabaseService, section_id: int) -> List:
    if db.get_section_by_id(section_id) is None:
        raise RecordNotFoundError("Section", section_id)
    return db.get_students_by_section_id(section_id)


def update_student_status(db: DatabaseService, student_id: int, status: StudentStatus):
    updated = db.update_student_status(student_id, status)
    if updated is None:
        raise RecordNotFoundError("Student", student_id)
    logger.info("Student %s status set to %s", student_id, status.value)
    return updated


def get_students_for_instructor(db: DatabaseService, instructor_id: int) -> List[Dict]:
    """One row per (student, course) for the instructor's accepted courses."""
    return db.get_students_for_instructor(instructor_id)


def export_section_roster_as_csv(db: DatabaseService, section_id: int) -> str:
    """
    Generates a CSV export of a section roster. An empty section yields a
    header-only CSV.
    """
    section = db.get_section_by_id(section_id)
    if section is None:
        raise RecordNotFoundError("Section", section_id)

    students = db.get_students_by_section_id(section_id)
    export_data = [
        {
            'Roll Number': s.roll_number,
            'Name': s.name,
            'Email': s.email,
            'Status': s.status.value,
            'Section': section.name,
        } for s in students
    ]

    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=ROSTER_COLUMNS)
    return df.to_csv(index=False)
