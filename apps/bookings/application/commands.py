"""
Booking Commands

Boundary records passed into BookingLifecycleService and the result it
hands back.

Commands:
- CreateBookingCommand: create a reservation (or a walk-in stay)
- TransitionRequest: change status and/or reassign the room
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from apps.bookings.domain.status import BookingStatus
from apps.inventory.services import DeductionResult


# ===== Commands =====

@dataclass(frozen=True)
class CreateBookingCommand:
    """
    Command to create a new booking

    ``booking_id`` is generated by the caller for web reservations; walk-ins
    get a server-generated id.
    """
    guest_name: str
    check_in: date
    check_out: date
    booking_id: str = ''
    room_id: Optional[int] = None
    guest_email: str = ''
    guest_phone: str = ''
    guests: int = 1
    total_price: Decimal = Decimal('0.00')
    status: str = BookingStatus.PENDING
    source: str = 'web'


@dataclass(frozen=True)
class TransitionRequest:
    """Status change and/or room reassignment; at least one must be set"""
    booking_id: str
    new_status: Optional[str] = None
    new_room_id: Optional[int] = None


# ===== Results =====

@dataclass
class TransitionResult:
    """
    What a lifecycle call did

    ``inventory`` is None when no deduction ran; ``already_deducted`` tells
    a repeated occupancy transition apart from one that needed none.
    """
    booking: object
    previous_status: str
    status: str
    room_id: Optional[int]
    previous_room_id: Optional[int]
    inventory: Optional[DeductionResult] = None
    already_deducted: bool = False
    message: str = ''

    @property
    def status_changed(self) -> bool:
        return self.previous_status != self.status

    def inventory_payload(self) -> dict:
        if self.inventory is not None:
            payload = self.inventory.to_dict()
        else:
            payload = {
                'room_id': self.room_id,
                'items_deducted': 0,
                'errors': [],
                'message': self.message,
                'items': [],
            }
        payload['already_deducted'] = self.already_deducted
        return payload

    def to_dict(self) -> dict:
        return {
            'booking_id': getattr(self.booking, 'booking_id', None),
            'previous_status': self.previous_status,
            'status': self.status,
            'room_id': self.room_id,
            'previous_room_id': self.previous_room_id,
            'message': self.message,
            'inventory': self.inventory_payload(),
        }
