# /portal/core/exceptions.py

"""
Domain exceptions raised by the service layer.

Services never raise HTTPException themselves. They raise one of these and
the routers translate it into the matching HTTP status, so the same business
logic can be reused outside a request (seeding scripts, tests).

Usage:
    from portal.core.exceptions import RecordNotFoundError

    if section is None:
        raise RecordNotFoundError("Section", section_id)
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException


class PortalError(Exception):
    """Base exception for all portal errors"""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


class RecordNotFoundError(PortalError):
    """A referenced record does not exist"""

    def __init__(self, entity: str, identifier: Any):
        super().__init__(
            f"{entity} with ID {identifier} not found",
            code="NOT_FOUND",
            details={"entity": entity, "id": identifier},
        )


class DuplicateRecordError(PortalError):
    """A unique field (roll number, email, code) is already taken"""

    def __init__(self, entity: str, field: str, value: Any):
        super().__init__(
            f"{entity} with {field} '{value}' already exists",
            code="DUPLICATE",
            details={"entity": entity, "field": field, "value": value},
        )


class InvalidReferenceError(PortalError):
    """Records exist but do not belong together (e.g. a major outside the chosen program)"""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_REFERENCE")


class InvalidStateError(PortalError):
    """The operation is not allowed in the record's current state"""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_STATE")


# --- HTTP translation (used by the routers) ---

_STATUS_BY_ERROR = {
    RecordNotFoundError: 404,
    DuplicateRecordError: 409,
    InvalidReferenceError: 400,
    InvalidStateError: 409,
}


def to_http_exception(error: PortalError) -> HTTPException:
    """Translate a domain error into the HTTPException the router should raise."""
    status_code = next(
        (code for cls, code in _STATUS_BY_ERROR.items() if isinstance(error, cls)),
        500,
    )
    return HTTPException(status_code=status_code, detail=error.message)
