# /portal/services/dashboard_service.py

import logging

from ..db.models.timetable_models import CourseRequestStatus
from ..models.dashboard_model import InstructorDashboardSummary
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def get_instructor_summary(db: DatabaseService, instructor_id: int) -> InstructorDashboardSummary:
    """
    Calculates the instructor dashboard counts in a single request. Uses the
    same filters as the client-side dashboard batch: pending requests are not
    scoped to an instructor, accepted requests and classes are.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.
        instructor_id: The authenticated instructor.

    Returns:
        An InstructorDashboardSummary with freshly computed counts.
    """
    try:
        pending = db.get_course_requests(status=CourseRequestStatus.PENDING)
        accepted = db.get_course_requests(status=CourseRequestStatus.ACCEPTED, instructor_id=instructor_id)
        classes = db.get_timetable_entries(teacher_id=instructor_id)
        enrolled = db.get_students_for_instructor(instructor_id)

        return InstructorDashboardSummary(
            pendingRequests=len(pending),
            acceptedCourses=len(accepted),
            totalClasses=len(classes),
            enrolledStudentCount=len(enrolled),
        )
    except Exception:
        logger.exception("Failed to calculate dashboard summary for instructor %s", instructor_id)
        # Re-raise so the router layer answers with a 500.
        raise
