"""
Identity resolution from the three role cookies.

A request may carry any subset of the studentId / employerId / adminId cookies.
resolve_identity maps that subset to exactly one Identity, checking roles in a
fixed order (student, then employer, then admin) and falling back to anonymous.
"""
from dataclasses import dataclass
from typing import Optional

from backend.app.models.enums import UserType


@dataclass(frozen=True)
class Identity:
    user_type: UserType
    user_id: Optional[str] = None

    @property
    def is_anonymous(self) -> bool:
        return self.user_type is UserType.ANONYMOUS


ANONYMOUS = Identity(UserType.ANONYMOUS)

# Role for each cookie argument, in priority order
_PRIORITY = (UserType.STUDENT, UserType.EMPLOYER, UserType.ADMIN)


def resolve_identity(
    student_id: Optional[str] = None,
    employer_id: Optional[str] = None,
    admin_id: Optional[str] = None,
) -> Identity:
    """Return the highest-priority identity present; empty strings count as absent."""
    for user_type, value in zip(_PRIORITY, (student_id, employer_id, admin_id)):
        if value:
            return Identity(user_type, value)
    return ANONYMOUS
