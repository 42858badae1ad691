"""Post-commit handlers for booking events."""

from __future__ import annotations

import logging

from .domain.events import BookingCreated, BookingDeleted, BookingStatusChanged

logger = logging.getLogger(__name__)


def log_booking_created(event: BookingCreated) -> None:
    logger.info(
        f"Booking {event.booking_id} created via {event.source} "
        f"at {event.status} for room {event.room_id}"
    )


def log_booking_status_changed(event: BookingStatusChanged) -> None:
    if event.previous_room_id != event.room_id:
        logger.info(
            f"Booking {event.booking_id} moved from room {event.previous_room_id} "
            f"to room {event.room_id} ({event.previous_status} -> {event.status})"
        )
    else:
        logger.info(f"Booking {event.booking_id}: {event.previous_status} -> {event.status}")


def log_booking_deleted(event: BookingDeleted) -> None:
    logger.info(
        f"Booking {event.booking_id} deleted (was {event.previous_status}), "
        f"room {event.room_id} released: {event.room_released}"
    )


def register_handlers(bus) -> None:
    bus.register_event_handler(BookingCreated, log_booking_created)
    bus.register_event_handler(BookingStatusChanged, log_booking_status_changed)
    bus.register_event_handler(BookingDeleted, log_booking_deleted)
