# /portal/services/database_helpers/student_repository_sql.py

"""
Raw SQLAlchemy queries for the Student table, including the denormalized
"students enrolled in my courses" projection used by the instructor
dashboard.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from portal.db.models.academic_models import Course, Section
from portal.db.models.student_models import Student, StudentStatus
from portal.db.models.timetable_models import CourseRequest, CourseRequestStatus


class StudentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_student_by_id(self, student_id: int) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def get_student_by_roll_number(self, roll_number: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.roll_number == roll_number).first()

    def get_student_by_email(self, email: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.email == email).first()

    def get_all_students(self, status: Optional[StudentStatus] = None) -> List[Student]:
        query = self.db.query(Student)
        if status is not None:
            query = query.filter(Student.status == status)
        return query.order_by(Student.roll_number).all()

    def get_students_by_section_id(self, section_id: int) -> List[Student]:
        return (
            self.db.query(Student)
            .filter(Student.section_id == section_id)
            .order_by(Student.roll_number)
            .all()
        )

    def add_student(self, record: Dict) -> Student:
        new_student = Student(**record)
        self.db.add(new_student)
        self.db.commit()
        self.db.refresh(new_student)
        return new_student

    def update_student_status(self, student_id: int, status: StudentStatus) -> Optional[Student]:
        db_student = self.get_student_by_id(student_id)
        if db_student:
            db_student.status = status
            self.db.commit()
            self.db.refresh(db_student)
        return db_student

    def get_students_for_instructor(self, instructor_id: int) -> List[Dict]:
        """
        Returns one row per (active student, course) pair for every section in
        which the instructor holds an accepted course request.
        """
        rows = (
            self.db.query(Student, Course, Section)
            .join(CourseRequest, CourseRequest.section_id == Student.section_id)
            .join(Course, Course.id == CourseRequest.course_id)
            .join(Section, Section.id == Student.section_id)
            .filter(
                CourseRequest.instructor_id == instructor_id,
                CourseRequest.status == CourseRequestStatus.ACCEPTED,
                Student.status == StudentStatus.ACTIVE,
            )
            .order_by(Course.code, Student.roll_number)
            .all()
        )
        return [
            {
                "id": student.id,
                "roll_number": student.roll_number,
                "name": student.name,
                "email": student.email,
                "course_code": course.code,
                "course_name": course.name,
                "section_name": section.name,
            }
            for student, course, section in rows
        ]
