"""Value Objects for domain model."""
from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Notification severity shown to the user."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class AccountKind(str, Enum):
    """Kind of canteen account, derived from the profile name."""

    STUDENT = "student"
    TEACHER = "teacher"


class Branch(str, Enum):
    """College branches offered at sign-up."""

    COMPUTER_SCIENCE = "Computer Science"
    INFORMATION_TECHNOLOGY = "Information Technology"
    ELECTRONICS = "Electronics"
    MECHANICAL = "Mechanical"
    CIVIL = "Civil"
    ELECTRICAL = "Electrical"
    BCA = "B.C.A"


class StudyYear(str, Enum):
    """Year of study."""

    FIRST = "First"
    SECOND = "Second"
    THIRD = "Third"
    FOURTH = "Fourth"

    @property
    def label(self) -> str:
        return f"{self.value} Year"


class CheckoutState(str, Enum):
    """States of one checkout attempt."""

    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


__all__ = [
    "AccountKind",
    "Branch",
    "CheckoutState",
    "Severity",
    "StudyYear",
]
