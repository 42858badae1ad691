"""
Booking Status Vocabulary

The closed set of booking statuses and the status groups the engine
reasons about. Defined once here and reused by the model, the state
machine and the availability query.
"""

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class BookingStatus(models.TextChoices):
    """
    Booking lifecycle states

    - PENDING: submitted, waiting for staff review
    - CONFIRMED / APPROVED: accepted by staff, room is held for the guest
    - CHECKED_IN: guest is in the room
    - COMPLETED: guest checked out
    - DECLINED / CANCELLED: rejected by staff or withdrawn
    """
    PENDING = 'pending', _('Pending')
    CONFIRMED = 'confirmed', _('Confirmed')
    APPROVED = 'approved', _('Approved')
    CHECKED_IN = 'checked_in', _('Checked in')
    COMPLETED = 'completed', _('Completed')
    DECLINED = 'declined', _('Declined')
    CANCELLED = 'cancelled', _('Cancelled')


# Room is in use: entering this set consumes the room's supplies
OCCUPYING_STATUSES = frozenset({
    BookingStatus.CONFIRMED,
    BookingStatus.APPROVED,
    BookingStatus.CHECKED_IN,
})

TERMINAL_STATUSES = frozenset({
    BookingStatus.COMPLETED,
    BookingStatus.DECLINED,
    BookingStatus.CANCELLED,
})

# Statuses that make a room unavailable for an overlapping stay
AVAILABILITY_BLOCKING_STATUSES = frozenset({
    BookingStatus.PENDING,
    BookingStatus.CONFIRMED,
    BookingStatus.CHECKED_IN,
})

# Deleting a booking in one of these statuses frees its room
ROOM_RELEASING_ON_DELETE = frozenset({
    BookingStatus.PENDING,
    BookingStatus.CONFIRMED,
    BookingStatus.CHECKED_IN,
})

ROOM_RELEASING_STATUSES = frozenset({
    BookingStatus.DECLINED,
    BookingStatus.CANCELLED,
    BookingStatus.COMPLETED,
})


def parse_status(value) -> BookingStatus:
    """Coerce a raw status string into BookingStatus (ValueError if unknown)"""
    if isinstance(value, BookingStatus):
        return value
    return BookingStatus(str(value).strip().lower())
