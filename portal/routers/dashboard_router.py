# /portal/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core.deps import require_instructor
from ..db.models.user_model import User
from ..models.dashboard_model import InstructorDashboardSummary
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/instructor/summary",
    response_model=InstructorDashboardSummary,
    summary="Get Instructor Dashboard Summary",
    description="Pending requests, accepted courses, scheduled classes and enrolled-student rows for the current instructor."
)
def get_instructor_dashboard_summary(
    db: DatabaseService = Depends(get_db_service),
    instructor: User = Depends(require_instructor)
):
    """Thin router: delegate straight to the service layer."""
    return dashboard_service.get_instructor_summary(db=db, instructor_id=instructor.id)
