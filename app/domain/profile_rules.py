"""Pure derivations over sign-up profile fields.

These run on read; nothing here mutates a form.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from app.domain.value_objects import AccountKind, Branch, StudyYear

TEACHER_NAME_PREFIX = "tech"

# Two-year programmes; everything else runs four years.
SHORT_PROGRAMME_BRANCHES = frozenset({Branch.BCA.value})

_SHORT_YEARS = (StudyYear.FIRST, StudyYear.SECOND)
_FULL_YEARS = (StudyYear.FIRST, StudyYear.SECOND, StudyYear.THIRD, StudyYear.FOURTH)

CONTACT_FIELD_BY_KIND: Mapping[AccountKind, str] = {
    AccountKind.TEACHER: "phone",
    AccountKind.STUDENT: "roll_number",
}


def derive_account_kind(name: str | None) -> AccountKind:
    """Teachers register with a name starting with "tech" (any case)."""
    if (name or "").strip().lower().startswith(TEACHER_NAME_PREFIX):
        return AccountKind.TEACHER
    return AccountKind.STUDENT


def valid_year_options(branch: str | None) -> tuple[StudyYear, ...]:
    if (branch or "").strip() in SHORT_PROGRAMME_BRANCHES:
        return _SHORT_YEARS
    return _FULL_YEARS


def reconcile_year(branch: str | None, year: str | None) -> str:
    """Return ``year`` if it is offered for ``branch``, else an empty selection."""
    if not year:
        return ""
    allowed = {option.value for option in valid_year_options(branch)}
    return year if year in allowed else ""


def contact_field_for(name: str | None) -> str:
    """Which contact field applies to the account derived from ``name``."""
    return CONTACT_FIELD_BY_KIND[derive_account_kind(name)]


@dataclass(frozen=True, slots=True)
class ContactCheck:
    valid: bool
    field: str
    title: str | None = None
    description: str | None = None


# Exact digit count required for each contact field
CONTACT_DIGITS: Mapping[str, int] = {
    "phone": 10,
    "roll_number": 12,
}

_CONTACT_ERRORS: Mapping[str, tuple[str, str]] = {
    "phone": ("Invalid Phone Number", "Phone number must be exactly 10 digits"),
    "roll_number": ("Invalid Roll Number", "Roll number must be exactly 12 digits"),
}


def validate_contact(name: str | None, phone: str | None, roll_number: str | None) -> ContactCheck:
    """Check the contact field that applies to ``name``.

    Teachers give a 10-digit phone number and students a 12-digit roll
    number. Only ASCII digits count; the other field is not looked at.
    """
    field = contact_field_for(name)
    value = phone if field == "phone" else roll_number
    value = value or ""
    if len(value) == CONTACT_DIGITS[field] and value.isascii() and value.isdigit():
        return ContactCheck(True, field)
    title, description = _CONTACT_ERRORS[field]
    return ContactCheck(False, field, title, description)
