"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class BookingCreated(DomainEvent):
    """A booking was created (web reservation or walk-in)"""
    booking_id: str
    room_id: int | None
    status: str
    source: str


@dataclass(kw_only=True)
class BookingStatusChanged(DomainEvent):
    """
    A booking transition landed

    Emitted for status changes and room reassignments alike;
    previous_room_id differs from room_id on reassignment.
    """
    booking_id: str
    previous_status: str
    status: str
    room_id: int | None
    previous_room_id: int | None


@dataclass(kw_only=True)
class BookingDeleted(DomainEvent):
    """A booking row was removed"""
    booking_id: str
    previous_status: str
    room_id: int | None
    room_released: bool
