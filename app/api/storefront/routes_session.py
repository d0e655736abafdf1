from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.domain import profile_rules
from app.domain.entities import AuthenticatedUser, Profile
from app.services.session_service import SessionRegistry, StorefrontSession

from .common import get_registry, get_session

logger = logging.getLogger(__name__)

router = APIRouter()


class SessionResponse(BaseModel):
    session_id: str


class SignInRequest(BaseModel):
    user_id: str
    name: str
    branch: str = ""
    year: str = ""


class SignupCheckRequest(BaseModel):
    name: str = ""
    branch: str = ""
    year: str = ""
    phone: str = ""
    roll_number: str = ""


class SignupCheckResponse(BaseModel):
    account_kind: str
    contact_field: str
    year_options: list[str]
    year: str
    valid: bool
    error_title: str | None = None
    error_description: str | None = None


@router.post("/session", response_model=SessionResponse, status_code=201)
async def start_session(registry: SessionRegistry = Depends(get_registry)):
    """Issue a new session id; send it back as X-Session-Id."""
    session = registry.create()
    return SessionResponse(session_id=session.session_id)


@router.delete("/session", status_code=204)
async def end_session(
    session: StorefrontSession = Depends(get_session),
    registry: SessionRegistry = Depends(get_registry),
):
    """End the session; its cart is discarded."""
    registry.close(session.session_id)


@router.post("/session/identity", status_code=204)
async def sign_in(body: SignInRequest, session: StorefrontSession = Depends(get_session)):
    """Attach the identity resolved by the auth service to this session."""
    session.identity.sign_in(
        AuthenticatedUser(id=body.user_id),
        Profile(name=body.name, branch=body.branch, year=body.year),
    )


@router.delete("/session/identity", status_code=204)
async def sign_out(session: StorefrontSession = Depends(get_session)):
    session.identity.sign_out()


@router.post("/signup/check", response_model=SignupCheckResponse)
async def check_signup(body: SignupCheckRequest):
    """Derived sign-up form state: account kind, year options and contact check."""
    contact = profile_rules.validate_contact(body.name, body.phone, body.roll_number)
    if not contact.valid:
        logger.debug("Sign-up contact check failed on %s", contact.field)
    return SignupCheckResponse(
        account_kind=profile_rules.derive_account_kind(body.name).value,
        contact_field=contact.field,
        year_options=[option.value for option in profile_rules.valid_year_options(body.branch)],
        year=profile_rules.reconcile_year(body.branch, body.year),
        valid=contact.valid,
        error_title=contact.title,
        error_description=contact.description,
    )
