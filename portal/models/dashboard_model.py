# /portal/models/dashboard_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field


# --- Model Definitions ---

class DashboardStats(BaseModel):
    """
    Summary counts shown on the instructor dashboard's stat cards. Always
    recomputed from a fresh fetch, never incremented in place.
    """

    pendingRequests: int = Field(
        default=0,
        description="Course requests still waiting for an instructor.",
        examples=[4]
    )

    acceptedCourses: int = Field(
        default=0,
        description="Course requests the current instructor has accepted.",
        examples=[2]
    )

    totalClasses: int = Field(
        default=0,
        description="Timetable entries taught by the current instructor.",
        examples=[9]
    )


class InstructorDashboardSummary(DashboardStats):
    """Server-side variant of the dashboard stats, computed in one request."""

    enrolledStudentCount: int = Field(
        default=0,
        description="Student/course rows across the instructor's accepted courses.",
        examples=[57]
    )
