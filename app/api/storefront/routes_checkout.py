from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.services.session_service import StorefrontSession

from .common import CheckoutResponse, drain_notifications, get_session

router = APIRouter()


class CheckoutStatusResponse(BaseModel):
    state: str
    is_submitting: bool


@router.post("/checkout", response_model=CheckoutResponse)
async def place_order(session: StorefrontSession = Depends(get_session)):
    """Submit the session cart as an order."""
    session.navigator.pop_redirect()
    result = await session.checkout.place_order()
    return CheckoutResponse(
        ok=result.ok,
        error_key=result.error_key,
        order_id=result.order_id,
        order_ref=result.order_ref,
        total=result.total,
        redirect=session.navigator.pop_redirect(),
        notifications=drain_notifications(session),
    )


@router.get("/checkout/status", response_model=CheckoutStatusResponse)
async def checkout_status(session: StorefrontSession = Depends(get_session)):
    return CheckoutStatusResponse(
        state=session.checkout.state.value,
        is_submitting=session.checkout.is_submitting,
    )
