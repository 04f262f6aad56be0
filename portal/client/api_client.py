# /portal/client/api_client.py

"""
Async HTTP client for the portal's REST API.

Responses are parsed into the same Pydantic models the backend serves, so
absent optional collections (e.g. `students`) surface as empty lists here,
at the boundary. Timeouts are enforced by the underlying httpx client.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..core.config import settings
from ..models.student_model import EnrolledStudentList
from ..models.timetable_model import CourseRequestList, TimetableList
from ..models.user_model import User as Principal

logger = logging.getLogger(__name__)


class PortalAPIClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=httpx.Timeout(timeout if timeout is not None else settings.CLIENT_TIMEOUT_SECONDS),
            transport=transport,
        )
        if token:
            self.set_token(token)

    async def __aenter__(self) -> "PortalAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def set_token(self, token: str) -> None:
        self._client.headers["Authorization"] = f"Bearer {token}"

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        query = {k: v for k, v in (params or {}).items() if v is not None}
        response = await self._client.get(path, params=query)
        response.raise_for_status()
        return response.json()

    # --- Auth ---

    async def login(self, email: str, password: str) -> str:
        """Password login; stores and returns the bearer token."""
        response = await self._client.post(
            "/api/auth/token",
            data={"username": email, "password": password},
        )
        response.raise_for_status()
        token = response.json()["access_token"]
        self.set_token(token)
        logger.debug("Logged in as %s", email)
        return token

    async def get_current_principal(self) -> Principal:
        return Principal.model_validate(await self._get("/api/auth/me"))

    # --- Dashboard data sources ---

    async def get_course_requests(self, status: str, instructor_id: Optional[int] = None) -> CourseRequestList:
        payload = await self._get(
            "/api/timetable/course-requests",
            {"status": status, "instructor_id": instructor_id},
        )
        return CourseRequestList.model_validate(payload)

    async def get_timetable(self, teacher_id: int) -> TimetableList:
        payload = await self._get("/api/timetable", {"teacher_id": teacher_id})
        return TimetableList.model_validate(payload)

    async def get_enrolled_students(self) -> EnrolledStudentList:
        payload = await self._get("/api/students/instructor-enrolled")
        return EnrolledStudentList.model_validate(payload)
