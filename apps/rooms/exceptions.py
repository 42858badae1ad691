"""Errors raised by room lookups and availability queries."""

from __future__ import annotations

from shared.domain.exceptions import DomainValidationError, NotFoundError


class RoomNotFoundError(NotFoundError):
    """Room not found"""
    code = "room_not_found"

    def __init__(self, room_id=None):
        super().__init__(f"Room {room_id} not found" if room_id is not None else "")
        self.room_id = room_id


class AvailabilityQueryError(DomainValidationError):
    """Invalid availability query"""
    code = "invalid_availability_query"
