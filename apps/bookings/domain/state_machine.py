"""
Booking State Machine

Pure transition rules: which status changes are legal, and what each one
means for the room and the warehouse. The lifecycle service applies a
TransitionPlan inside a single unit of work.

State transitions:
- PENDING -> CONFIRMED | APPROVED | DECLINED | CANCELLED | CHECKED_IN
- CONFIRMED | APPROVED -> CHECKED_IN | DECLINED | CANCELLED
- CHECKED_IN -> COMPLETED
- COMPLETED, DECLINED, CANCELLED are terminal

Re-applying the current status of a non-terminal booking is accepted and
changes nothing but the room synchronisation. Terminal bookings reject
every transition.
"""

from dataclasses import dataclass
from typing import Dict, FrozenSet

from apps.bookings.domain.status import (
    OCCUPYING_STATUSES,
    ROOM_RELEASING_STATUSES,
    TERMINAL_STATUSES,
    BookingStatus,
)
from apps.bookings.exceptions import InvalidTransitionError

S = BookingStatus

ALLOWED_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    S.PENDING: frozenset({S.CONFIRMED, S.APPROVED, S.DECLINED, S.CANCELLED, S.CHECKED_IN}),
    S.CONFIRMED: frozenset({S.CHECKED_IN, S.DECLINED, S.CANCELLED}),
    S.APPROVED: frozenset({S.CHECKED_IN, S.DECLINED, S.CANCELLED}),
    S.CHECKED_IN: frozenset({S.COMPLETED}),
    S.COMPLETED: frozenset(),
    S.DECLINED: frozenset(),
    S.CANCELLED: frozenset(),
}

# Room status values (mirrors rooms.Room.Status without importing the model)
ROOM_BOOKED = 'booked'
ROOM_AVAILABLE = 'available'


@dataclass(frozen=True)
class TransitionPlan:
    """
    What applying a transition entails

    room_status: status to write on the booking's (possibly new) room, or None
    release_previous_room: free the room the booking is moving away from
    deduct: consume the room's supplies from the warehouse
    already_deducted: the booking was already occupying before this call
    """
    previous: BookingStatus
    target: BookingStatus
    room_status: str | None
    release_previous_room: bool
    deduct: bool
    already_deducted: bool

    @property
    def status_changed(self) -> bool:
        return self.previous != self.target


def ensure_transition_allowed(previous: BookingStatus, target: BookingStatus) -> None:
    if previous in TERMINAL_STATUSES:
        raise InvalidTransitionError(previous.value, target.value, "booking is already closed")
    if target == previous:
        return
    if target not in ALLOWED_TRANSITIONS[previous]:
        raise InvalidTransitionError(previous.value, target.value)


def plan_transition(
    previous: BookingStatus,
    target: BookingStatus,
    *,
    has_room: bool,
    room_changed: bool = False,
) -> TransitionPlan:
    """Validate a transition and decide its room and inventory effects"""
    ensure_transition_allowed(previous, target)

    entering_occupancy = target in OCCUPYING_STATUSES and previous not in OCCUPYING_STATUSES

    if target in ROOM_RELEASING_STATUSES:
        room_status = ROOM_AVAILABLE
    elif target in OCCUPYING_STATUSES or room_changed:
        room_status = ROOM_BOOKED
    else:
        room_status = None

    return TransitionPlan(
        previous=previous,
        target=target,
        room_status=room_status if has_room else None,
        release_previous_room=room_changed,
        deduct=entering_occupancy and has_room,
        already_deducted=target in OCCUPYING_STATUSES and previous in OCCUPYING_STATUSES,
    )


def plan_creation(initial: BookingStatus, *, has_room: bool) -> TransitionPlan:
    """A new booking books its room; occupying initial statuses deduct at once"""
    if initial in TERMINAL_STATUSES:
        raise InvalidTransitionError('new', initial.value, "bookings cannot be created closed")

    return TransitionPlan(
        previous=initial,
        target=initial,
        room_status=ROOM_BOOKED if has_room else None,
        release_previous_room=False,
        deduct=initial in OCCUPYING_STATUSES and has_room,
        already_deducted=False,
    )
