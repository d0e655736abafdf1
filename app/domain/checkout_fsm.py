"""Checkout attempt transition rules (single source of truth)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from app.domain.value_objects import CheckoutState

ALLOWED_TRANSITIONS: Mapping[CheckoutState, frozenset[CheckoutState]] = {
    CheckoutState.IDLE: frozenset({CheckoutState.VALIDATING}),
    CheckoutState.VALIDATING: frozenset(
        {
            CheckoutState.REJECTED,
            CheckoutState.SUBMITTING,
        }
    ),
    CheckoutState.REJECTED: frozenset({CheckoutState.IDLE}),
    CheckoutState.SUBMITTING: frozenset(
        {
            CheckoutState.SUCCEEDED,
            CheckoutState.FAILED,
            # Cancelled while awaiting the collaborator
            CheckoutState.IDLE,
        }
    ),
    CheckoutState.SUCCEEDED: frozenset({CheckoutState.IDLE}),
    CheckoutState.FAILED: frozenset({CheckoutState.IDLE}),
}

# Any state other than IDLE blocks a new trigger.
BUSY_STATES = frozenset(set(CheckoutState) - {CheckoutState.IDLE})


@dataclass(frozen=True, slots=True)
class TransitionValidationResult:
    allowed: bool
    reason: str | None = None


def validate_checkout_transition(
    current: CheckoutState | str,
    target: CheckoutState | str,
) -> TransitionValidationResult:
    try:
        current_state = CheckoutState(current)
        target_state = CheckoutState(target)
    except ValueError as exc:
        return TransitionValidationResult(False, str(exc))

    if target_state not in ALLOWED_TRANSITIONS[current_state]:
        return TransitionValidationResult(
            False,
            f"Transition '{current_state.value} -> {target_state.value}' is not allowed",
        )
    return TransitionValidationResult(True)


def is_busy(state: CheckoutState | str) -> bool:
    return CheckoutState(state) in BUSY_STATES
