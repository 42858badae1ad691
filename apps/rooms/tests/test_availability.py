"""Tests for availability queries."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.bookings.models import Booking
from apps.rooms.exceptions import AvailabilityQueryError, RoomNotFoundError
from apps.rooms.models import Room
from apps.rooms.services import find_available_rooms, occupied_date_ranges

pytestmark = pytest.mark.django_db


def may(day: int) -> date:
    return date(2024, 5, day)


@pytest.fixture
def booked_room(make_room, make_booking):
    """Room booked (confirmed) for May 10 - May 15, 2024."""
    room = make_room("Deluxe 101", price="2500.00", status=Room.Status.BOOKED)
    make_booking(room, status=Booking.Status.CONFIRMED, check_in=may(10), check_out=may(15))
    return room


@pytest.mark.parametrize(
    "check_in, check_out, available",
    [
        (may(11), may(14), False),  # contained
        (may(14), may(17), False),  # overlaps the tail
        (may(8), may(11), False),  # overlaps the head
        (may(8), may(20), False),  # covers
        (may(15), may(18), True),  # starts on check-out day
        (may(5), may(10), True),  # ends on check-in day
    ],
)
def test_overlapping_bookings_exclude_room(booked_room, check_in, check_out, available):
    rooms = list(find_available_rooms(check_in, check_out))

    assert (booked_room in rooms) is available


@pytest.mark.parametrize("status_", ["cancelled", "declined", "completed", "approved"])
def test_non_blocking_statuses_do_not_exclude(make_room, make_booking, status_):
    room = make_room()
    make_booking(room, status=status_, check_in=may(10), check_out=may(15))

    assert room in find_available_rooms(may(11), may(12))


def test_pending_booking_blocks(make_room, make_booking):
    room = make_room()
    make_booking(room, status=Booking.Status.PENDING, check_in=may(10), check_out=may(15))

    assert room not in find_available_rooms(may(11), may(12))


def test_capacity_maintenance_and_ordering(make_room):
    cheap = make_room("Standard 1", guests=2, price="1500.00")
    cheap_newer = make_room("Standard 2", guests=2, price="1500.00")
    suite = make_room("Suite", guests=4, price="8000.00")
    make_room("Family (repairs)", guests=4, price="1000.00", status=Room.Status.MAINTENANCE)
    make_room("Single", guests=1, price="900.00")

    rooms = list(find_available_rooms(may(1), may(3), min_guests=2))

    assert rooms == [cheap_newer, cheap, suite]


def test_invalid_query():
    with pytest.raises(AvailabilityQueryError):
        find_available_rooms(may(3), may(3))
    with pytest.raises(AvailabilityQueryError):
        find_available_rooms(may(1), may(3), min_guests=0)


def test_occupied_date_ranges(booked_room, make_booking):
    make_booking(booked_room, booking_id="BK-OLD", status=Booking.Status.CANCELLED, check_in=may(1), check_out=may(3))
    make_booking(booked_room, booking_id="BK-NEXT", status=Booking.Status.PENDING, check_in=may(20), check_out=may(22))

    ranges = occupied_date_ranges(booked_room.pk)

    assert [(r["booking_id"], r["check_in"], r["check_out"]) for r in ranges] == [
        ("BK-1001", may(10), may(15)),
        ("BK-NEXT", may(20), may(22)),
    ]


def test_occupied_date_ranges_unknown_room():
    with pytest.raises(RoomNotFoundError):
        occupied_date_ranges(999)


def test_availability_endpoint(booked_room, make_room):
    free = make_room("Deluxe 102", price="2600.00")
    client = APIClient()

    response = client.get(
        reverse("room-availability"),
        {"check_in": "2024-05-12", "check_out": "2024-05-14", "guests": 2},
    )

    assert response.status_code == status.HTTP_200_OK, response.data
    assert [r["id"] for r in response.data] == [free.pk]
    assert Decimal(response.data[0]["price"]) == Decimal("2600.00")


def test_availability_endpoint_validates_dates():
    response = APIClient().get(
        reverse("room-availability"),
        {"check_in": "2024-05-14", "check_out": "2024-05-12"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_occupied_dates_endpoint(booked_room):
    response = APIClient().get(reverse("room-occupied-dates", args=[booked_room.pk]))

    assert response.status_code == status.HTTP_200_OK, response.data
    assert response.data == [
        {"booking_id": "BK-1001", "check_in": "2024-05-10", "check_out": "2024-05-15", "status": "confirmed"}
    ]


def test_occupied_dates_endpoint_unknown_room():
    response = APIClient().get(reverse("room-occupied-dates", args=[12345]))

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data["code"] == "room_not_found"
