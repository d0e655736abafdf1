"""User identity and profile entity models."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from app.domain.value_objects import AccountKind


class AuthenticatedUser(BaseModel):
    """Currently signed-in user as reported by the identity provider."""

    id: str = Field(..., min_length=1, description="Opaque user ID")

    class Config:
        """Pydantic config."""

        from_attributes = True
        frozen = True


class Profile(BaseModel):
    """Profile of the signed-in user shown on the order summary."""

    name: str = Field(..., min_length=1, description="Display name")
    branch: str = Field("", description="College branch")
    year: str = Field("", description="Year of study")

    class Config:
        """Pydantic config."""

        from_attributes = True
        frozen = True

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("Name must not be blank")
        return cleaned

    @property
    def account_kind(self) -> AccountKind:
        from app.domain.profile_rules import derive_account_kind

        return derive_account_kind(self.name)

    @property
    def summary(self) -> str:
        """One-line "branch - year" description, empty when unknown."""
        if not self.branch and not self.year:
            return ""
        return f"{self.branch} - {self.year} Year"
