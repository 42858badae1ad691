"""Tests for periodic booking tasks."""

from __future__ import annotations

from datetime import timedelta

import pytest
from django.utils import timezone

from apps.bookings.models import Booking
from apps.bookings.tasks import complete_finished_bookings
from apps.rooms.models import Room

pytestmark = pytest.mark.django_db


def test_complete_finished_bookings_checks_out_ended_stays(make_room, make_booking):
    today = timezone.now().date()
    ended_room = make_room("Deluxe 101", status=Room.Status.BOOKED)
    staying_room = make_room("Deluxe 102", status=Room.Status.BOOKED)
    ended = make_booking(
        ended_room,
        booking_id="BK-ENDED",
        status=Booking.Status.CHECKED_IN,
        check_in=today - timedelta(days=3),
        check_out=today,
    )
    staying = make_booking(
        staying_room,
        booking_id="BK-STAYING",
        status=Booking.Status.CHECKED_IN,
        check_in=today - timedelta(days=1),
        check_out=today + timedelta(days=2),
    )

    result = complete_finished_bookings()

    assert result == {"completed": 1, "failed": 0}
    ended.refresh_from_db()
    staying.refresh_from_db()
    ended_room.refresh_from_db()
    assert ended.status == Booking.Status.COMPLETED
    assert staying.status == Booking.Status.CHECKED_IN
    assert ended_room.status == Room.Status.AVAILABLE


def test_complete_finished_bookings_ignores_unconfirmed(make_room, make_booking):
    today = timezone.now().date()
    make_booking(
        make_room(),
        status=Booking.Status.PENDING,
        check_in=today - timedelta(days=3),
        check_out=today - timedelta(days=1),
    )

    assert complete_finished_bookings() == {"completed": 0, "failed": 0}
