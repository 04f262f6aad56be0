# /portal/client/dashboard_view.py

"""
Render model for the instructor dashboard. Decides *what* is shown for a
given `DashboardState`; presentation (HTML, terminal) is left to the host.
"""

import enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .dashboard_flow import DashboardPhase, DashboardState

EMPTY_STATE_MESSAGE = "No students found enrolled in your courses."


class ViewKind(str, enum.Enum):
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


class StatCard(BaseModel):
    label: str
    value: int


class StudentTableRow(BaseModel):
    key: Tuple[int, str]
    roll_number: str
    name: str
    course: str
    section: str
    email: str


class DashboardView(BaseModel):
    kind: ViewKind
    stat_cards: List[StatCard] = Field(default_factory=list)
    rows: List[StudentTableRow] = Field(default_factory=list)
    empty_message: Optional[str] = None


def render_dashboard(state: DashboardState) -> DashboardView:
    """
    Anything short of READY (including UNAUTHORIZED, which is on its way to
    the login page) is a bare loading indicator. READY shows the stat cards
    plus either the student table or the empty-state message, never a
    header-only table.
    """
    if state.phase != DashboardPhase.READY:
        return DashboardView(kind=ViewKind.LOADING)

    stats = state.stats
    stat_cards = [
        StatCard(label="Pending Requests", value=stats.pendingRequests),
        StatCard(label="Accepted Courses", value=stats.acceptedCourses),
        StatCard(label="Total Classes", value=stats.totalClasses),
    ]

    if not state.enrolled_students:
        return DashboardView(kind=ViewKind.EMPTY, stat_cards=stat_cards, empty_message=EMPTY_STATE_MESSAGE)

    rows = [
        StudentTableRow(
            key=student.row_key,
            roll_number=student.roll_number,
            name=student.name,
            course=f"{student.course_name} ({student.course_code})",
            section=student.section_name,
            email=student.email,
        )
        for student in state.enrolled_students
    ]
    return DashboardView(kind=ViewKind.POPULATED, stat_cards=stat_cards, rows=rows)
