# /portal/services/database_helpers/timetable_repository_sql.py

from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from portal.db.models.timetable_models import CourseRequest, CourseRequestStatus, TimetableEntry


class TimetableRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Course Request Methods ---

    def get_course_requests(
        self,
        status: Optional[CourseRequestStatus] = None,
        instructor_id: Optional[int] = None
    ) -> List[CourseRequest]:
        query = self.db.query(CourseRequest)
        if status is not None:
            query = query.filter(CourseRequest.status == status)
        if instructor_id is not None:
            query = query.filter(CourseRequest.instructor_id == instructor_id)
        return query.order_by(CourseRequest.created_at, CourseRequest.id).all()

    def get_course_request_by_id(self, request_id: int) -> Optional[CourseRequest]:
        return self.db.query(CourseRequest).filter(CourseRequest.id == request_id).first()

    def find_open_course_request(self, course_id: int, section_id: int) -> Optional[CourseRequest]:
        """A pending or accepted request for the same course and section, if any."""
        return (
            self.db.query(CourseRequest)
            .filter(
                CourseRequest.course_id == course_id,
                CourseRequest.section_id == section_id,
                CourseRequest.status != CourseRequestStatus.REJECTED,
            )
            .first()
        )

    def add_course_request(self, record: Dict) -> CourseRequest:
        new_request = CourseRequest(**record)
        self.db.add(new_request)
        self.db.commit()
        self.db.refresh(new_request)
        return new_request

    def update_course_request(self, request_id: int, data: Dict) -> Optional[CourseRequest]:
        db_request = self.get_course_request_by_id(request_id)
        if db_request:
            for key, value in data.items():
                setattr(db_request, key, value)
            self.db.commit()
            self.db.refresh(db_request)
        return db_request

    # --- Timetable Methods ---

    def get_timetable_entries(
        self,
        teacher_id: Optional[int] = None,
        section_id: Optional[int] = None
    ) -> List[TimetableEntry]:
        query = self.db.query(TimetableEntry)
        if teacher_id is not None:
            query = query.filter(TimetableEntry.teacher_id == teacher_id)
        if section_id is not None:
            query = query.filter(TimetableEntry.section_id == section_id)
        return query.order_by(TimetableEntry.start_time, TimetableEntry.id).all()

    def find_conflicting_entry(
        self,
        day_of_week: str,
        start_time: str,
        end_time: str,
        teacher_id: int,
        section_id: int
    ) -> Optional[TimetableEntry]:
        """
        An existing entry on the same day that overlaps [start_time, end_time)
        and shares either the teacher or the section.
        """
        return (
            self.db.query(TimetableEntry)
            .filter(
                TimetableEntry.day_of_week == day_of_week,
                TimetableEntry.start_time < end_time,
                TimetableEntry.end_time > start_time,
                (TimetableEntry.teacher_id == teacher_id) | (TimetableEntry.section_id == section_id),
            )
            .first()
        )

    def add_timetable_entry(self, record: Dict) -> TimetableEntry:
        new_entry = TimetableEntry(**record)
        self.db.add(new_entry)
        self.db.commit()
        self.db.refresh(new_entry)
        return new_entry
