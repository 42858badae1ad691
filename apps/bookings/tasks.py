"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore
from django.utils import timezone  # type: ignore

from shared.domain.exceptions import EngineError

from .models import Booking
from .services import BookingLifecycleService

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (run by Celery Beat)
# ============================================================================

@shared_task(name="bookings.complete_finished_bookings")
def complete_finished_bookings() -> dict[str, int]:
    """
    Check out guests whose stay has ended.

    Checked-in bookings with check_out today or earlier move to COMPLETED
    through the lifecycle service, which frees their rooms.

    Runs hourly.

    Returns:
        dict: {"completed": number of bookings checked out, "failed": number skipped}
    """
    today = timezone.now().date()
    completed_count = 0
    failed_count = 0

    booking_ids = list(
        Booking.objects.filter(
            status=Booking.Status.CHECKED_IN,
            check_out__lte=today,
        ).values_list("booking_id", flat=True)
    )

    service = BookingLifecycleService()
    for booking_id in booking_ids:
        try:
            service.check_out(booking_id)
            completed_count += 1
        except EngineError as e:
            failed_count += 1
            logger.error(f"Error completing booking {booking_id}: {e}", exc_info=True)

    if completed_count > 0:
        logger.info(f"Completed {completed_count} bookings")

    return {"completed": completed_count, "failed": failed_count}
