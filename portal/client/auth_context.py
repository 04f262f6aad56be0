# /portal/client/auth_context.py

"""
Explicit authentication state handed to the dashboard flow.

The flow never reads a global session: whoever hosts it (a page, a CLI, a
test) builds an `AuthContext` and passes it in on every trigger.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..db.models.user_model import UserRole
from ..models.user_model import User as Principal


@dataclass(frozen=True)
class AuthContext:
    """
    principal            - the authenticated account, or None
    has_instructor_role  - the auth layer's instructor flag for `principal`
    auth_resolving       - True while the session is still being restored
    """
    principal: Optional[Principal] = None
    has_instructor_role: bool = False
    auth_resolving: bool = True

    @classmethod
    def resolving(cls) -> "AuthContext":
        return cls(auth_resolving=True)

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls(principal=None, has_instructor_role=False, auth_resolving=False)

    @classmethod
    def for_principal(cls, principal: Principal) -> "AuthContext":
        return cls(
            principal=principal,
            has_instructor_role=principal.role == UserRole.INSTRUCTOR,
            auth_resolving=False,
        )

    @property
    def principal_identity(self) -> Optional[Tuple[int, str]]:
        if self.principal is None:
            return None
        return (self.principal.id, UserRole(self.principal.role).value)

    def can_view_instructor_dashboard(self) -> bool:
        """Instructors and admins may open the instructor dashboard."""
        if self.principal is None:
            return False
        return self.has_instructor_role or self.principal.role == UserRole.ADMIN
