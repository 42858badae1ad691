"""Availability queries over rooms and their blocking bookings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List

from django.db import DEFAULT_DB_ALIAS  # type: ignore

from shared.domain.value_objects import DateRange

from .exceptions import AvailabilityQueryError, RoomNotFoundError
from .models import Room


@dataclass(frozen=True)
class AvailabilityRequest:
    check_in: date
    check_out: date
    min_guests: int = 1

    def __post_init__(self):
        if self.check_in is None or self.check_out is None:
            raise AvailabilityQueryError("check_in and check_out are required")
        if self.check_in >= self.check_out:
            raise AvailabilityQueryError("check_out must be after check_in")
        if self.min_guests < 1:
            raise AvailabilityQueryError("guests must be at least 1")

    @property
    def stay(self) -> DateRange:
        return DateRange(self.check_in, self.check_out)


def find_available_rooms(check_in, check_out, min_guests: int = 1, *, using: str = DEFAULT_DB_ALIAS):
    """
    Rooms free for the whole ``[check_in, check_out)`` stay.

    Excludes rooms under maintenance and rooms holding a pending, confirmed
    or checked-in booking that overlaps the stay. Back-to-back stays do not
    overlap. Cheapest first, newest first on ties.
    """
    from apps.bookings.models import Booking  # Local import to prevent circular dependency

    request = AvailabilityRequest(check_in, check_out, min_guests)

    busy_room_ids = (
        Booking.objects.using(using)
        .blocking_availability()
        .overlapping(request.check_in, request.check_out)
        .filter(room__isnull=False)
        .values("room_id")
    )

    return (
        Room.objects.using(using)
        .filter(guests__gte=request.min_guests)
        .exclude(status=Room.Status.MAINTENANCE)
        .exclude(pk__in=busy_room_ids)
        .order_by("price", "-id")
    )


def occupied_date_ranges(room_id, *, using: str = DEFAULT_DB_ALIAS) -> List[dict]:
    """Blocking bookings of one room, earliest stay first."""
    from apps.bookings.models import Booking

    if not Room.objects.using(using).filter(pk=room_id).exists():
        raise RoomNotFoundError(room_id)

    bookings = (
        Booking.objects.using(using)
        .blocking_availability()
        .filter(room_id=room_id)
        .order_by("check_in")
        .values("booking_id", "check_in", "check_out", "status")
    )
    return list(bookings)
