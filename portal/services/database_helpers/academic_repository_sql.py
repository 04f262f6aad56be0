# /portal/services/database_helpers/academic_repository_sql.py

"""
Raw SQLAlchemy queries for the academic catalogue (programs, majors,
sections, courses). The catalogue is public, so none of these lookups are
scoped to a user.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from portal.db.models.academic_models import Course, Major, Program, Section


class AcademicRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def _add(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    # --- Program Methods ---

    def get_all_programs(self) -> List[Program]:
        return self.db.query(Program).order_by(Program.name).all()

    def get_program_by_id(self, program_id: int) -> Optional[Program]:
        return self.db.query(Program).filter(Program.id == program_id).first()

    def add_program(self, record: Dict) -> Program:
        return self._add(Program(**record))

    # --- Major Methods ---

    def get_majors(self, program_id: Optional[int] = None) -> List[Major]:
        query = self.db.query(Major)
        if program_id is not None:
            query = query.filter(Major.program_id == program_id)
        return query.order_by(Major.name).all()

    def get_major_by_id(self, major_id: int) -> Optional[Major]:
        return self.db.query(Major).filter(Major.id == major_id).first()

    def add_major(self, record: Dict) -> Major:
        return self._add(Major(**record))

    # --- Section Methods ---

    def get_sections(self, major_id: Optional[int] = None) -> List[Section]:
        query = self.db.query(Section)
        if major_id is not None:
            query = query.filter(Section.major_id == major_id)
        return query.order_by(Section.semester, Section.name).all()

    def get_section_by_id(self, section_id: int) -> Optional[Section]:
        return self.db.query(Section).filter(Section.id == section_id).first()

    def add_section(self, record: Dict) -> Section:
        return self._add(Section(**record))

    # --- Course Methods ---

    def get_course_by_id(self, course_id: int) -> Optional[Course]:
        return self.db.query(Course).filter(Course.id == course_id).first()

    def add_course(self, record: Dict) -> Course:
        return self._add(Course(**record))
