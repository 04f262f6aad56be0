# /portal/client/dashboard_flow.py

"""
Instructor dashboard aggregation flow.

Once the host reports a resolved, authorized principal, the flow issues four
independent queries concurrently, reduces them to `DashboardStats` and keeps
the enrolled-student rows for the table:

    UNRESOLVED --(denied)--> UNAUTHORIZED      redirect, no fetch
    UNRESOLVED --(allowed)-> LOADING -> READY  one fetch batch

READY is reached even when the batch fails: the failure is logged and the
defaults (all counts zero, no students) stay in place. A host drives the flow
by calling `sync()` whenever its auth state changes, `refresh()` to reload,
and `teardown()` when the view goes away.
"""

import asyncio
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Tuple

from ..core.config import settings
from ..models.dashboard_model import DashboardStats
from ..models.student_model import EnrolledStudentList, EnrolledStudentRow
from ..models.timetable_model import CourseRequestList, TimetableList
from .auth_context import AuthContext

logger = logging.getLogger(__name__)


class DashboardPhase(str, enum.Enum):
    UNRESOLVED = "unresolved"
    UNAUTHORIZED = "unauthorized"
    LOADING = "loading"
    READY = "ready"


class JoinPolicy(str, enum.Enum):
    """
    ALL_OR_NOTHING: one failed fetch discards the whole batch.
    ISOLATED: each failed fetch falls back to an empty result on its own.
    """
    ALL_OR_NOTHING = "all_or_nothing"
    ISOLATED = "isolated"


class DashboardFetchError(Exception):
    """One of the batch's fetches failed; `source` names which one."""

    def __init__(self, source: str, cause: BaseException):
        self.source = source
        self.cause = cause
        super().__init__(f"{source} fetch failed: {cause!r}")


@dataclass
class DashboardState:
    phase: DashboardPhase = DashboardPhase.UNRESOLVED
    stats: DashboardStats = field(default_factory=DashboardStats)
    enrolled_students: List[EnrolledStudentRow] = field(default_factory=list)


def derive_stats(
    pending: Optional[CourseRequestList],
    accepted: Optional[CourseRequestList],
    timetable: Optional[TimetableList]
) -> DashboardStats:
    """Counts straight from the latest results. A missing result counts as zero."""
    return DashboardStats(
        pendingRequests=len(pending.requests) if pending is not None else 0,
        acceptedCourses=len(accepted.requests) if accepted is not None else 0,
        totalClasses=len(timetable.timetable) if timetable is not None else 0,
    )


def derive_enrolled_students(enrolled: Optional[EnrolledStudentList]) -> List[EnrolledStudentRow]:
    if enrolled is None:
        return []
    return enrolled.students or []


class InstructorDashboardFlow:
    """
    Args:
        api: a `PortalAPIClient` (or anything with the same four coroutines).
        navigate: called with `login_path` when the principal is not allowed in.
        join_policy: how a failed fetch affects the rest of the batch.
        login_path: redirect target for unauthorized principals.
    """

    def __init__(
        self,
        api,
        navigate: Callable[[str], Any],
        join_policy: Optional[JoinPolicy] = None,
        login_path: Optional[str] = None
    ):
        self._api = api
        self._navigate = navigate
        self.join_policy = JoinPolicy(join_policy or settings.DASHBOARD_JOIN_POLICY)
        self.login_path = login_path or settings.LOGIN_PATH

        self.state = DashboardState()
        self._last_key: Optional[Tuple] = None
        self._generation = 0
        self._disposed = False

    @property
    def phase(self) -> DashboardPhase:
        return self.state.phase

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _dependency_key(self, auth: AuthContext) -> Tuple:
        return (auth.auth_resolving, auth.has_instructor_role, auth.principal_identity, id(self._navigate))

    # --- Triggers ---

    async def sync(self, auth: AuthContext) -> DashboardPhase:
        """
        Re-evaluate after the host's auth dependencies may have changed.
        Calling it again with unchanged dependencies is a no-op, so a repeated
        trigger while LOADING never issues a second batch.
        """
        if self._disposed or self.state.phase == DashboardPhase.UNAUTHORIZED:
            return self.state.phase

        key = self._dependency_key(auth)
        if key == self._last_key and self.state.phase != DashboardPhase.UNRESOLVED:
            return self.state.phase
        self._last_key = key

        if auth.auth_resolving:
            # Auth still pending: neither fetch nor redirect.
            return self.state.phase

        if not auth.can_view_instructor_dashboard():
            # Any batch still in flight is now stale.
            self._generation += 1
            self.state = DashboardState(phase=DashboardPhase.UNAUTHORIZED)
            logger.info("Dashboard access denied for principal %s; redirecting to %s",
                        auth.principal_identity, self.login_path)
            self._navigate(self.login_path)
            return self.state.phase

        return await self._load(auth.principal)

    async def refresh(self, auth: AuthContext) -> DashboardPhase:
        """Start over from UNRESOLVED and load again."""
        if self._disposed:
            return self.state.phase
        self.state = DashboardState()
        self._last_key = None
        return await self.sync(auth)

    def teardown(self) -> None:
        """The hosting view is gone; results still in flight will be dropped."""
        self._disposed = True

    # --- Fetch batch ---

    def _batch(self, principal) -> List[Tuple[str, Awaitable]]:
        return [
            ("pending_requests", self._api.get_course_requests(status="pending")),
            ("accepted_courses", self._api.get_course_requests(status="accepted", instructor_id=principal.id)),
            ("timetable", self._api.get_timetable(teacher_id=principal.id)),
            ("enrolled_students", self._api.get_enrolled_students()),
        ]

    @staticmethod
    async def _guarded(source: str, fetch: Awaitable):
        try:
            return await fetch
        except Exception as exc:
            raise DashboardFetchError(source, exc) from exc

    @staticmethod
    async def _settled(source: str, fetch: Awaitable):
        try:
            return await fetch
        except Exception as exc:
            logger.warning("Dashboard %s fetch failed, showing it as empty: %r", source, exc)
            return None

    async def _run_batch(self, principal) -> Sequence:
        batch = self._batch(principal)

        if self.join_policy == JoinPolicy.ISOLATED:
            return await asyncio.gather(*(self._settled(source, fetch) for source, fetch in batch))

        tasks = [asyncio.ensure_future(self._guarded(source, fetch)) for source, fetch in batch]
        try:
            return await asyncio.gather(*tasks)
        except DashboardFetchError:
            for task in tasks:
                task.cancel()
            raise

    async def _load(self, principal) -> DashboardPhase:
        self._generation += 1
        generation = self._generation
        # Defaults in place before anything is awaited.
        self.state = DashboardState(phase=DashboardPhase.LOADING)

        results = None
        try:
            results = await self._run_batch(principal)
        except DashboardFetchError as exc:
            logger.error("Failed to load dashboard data: %s", exc, exc_info=exc.cause)

        if self._disposed or generation != self._generation:
            logger.debug("Discarding results of dashboard batch %s", generation)
            return self.state.phase

        if results is not None:
            pending, accepted, timetable, enrolled = results
            self.state.stats = derive_stats(pending, accepted, timetable)
            self.state.enrolled_students = derive_enrolled_students(enrolled)
        self.state.phase = DashboardPhase.READY
        return self.state.phase
