"""Shared pytest fixtures for the engine test suite."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from apps.bookings.models import Booking
from apps.inventory.models import InventoryItem, RoomInventoryAssignment, WarehouseStock
from apps.rooms.models import Room
from apps.users.models import User


@pytest.fixture
def make_room(db):
    def _make(name="Deluxe 101", guests=2, price="2500.00", status=Room.Status.AVAILABLE):
        return Room.objects.create(name=name, guests=guests, price=Decimal(price), status=status)

    return _make


@pytest.fixture
def make_item(db):
    """Item with optional warehouse row and optional room assignment."""

    def _make(
        name="Bath towel",
        *,
        room=None,
        assigned=2,
        warehouse=5,
        threshold=1,
        unit="pcs",
        unit_cost="35.00",
        category="linen",
    ):
        item = InventoryItem.objects.create(
            name=name,
            category=category,
            unit=unit,
            unit_cost=Decimal(unit_cost),
            low_stock_threshold=threshold,
        )
        if warehouse is not None:
            WarehouseStock.objects.create(item=item, quantity=warehouse)
        if room is not None:
            RoomInventoryAssignment.objects.create(room=room, item=item, current_quantity=assigned)
        return item

    return _make


@pytest.fixture
def make_booking(db):
    def _make(
        room,
        booking_id="BK-1001",
        status=Booking.Status.PENDING,
        check_in=date(2024, 5, 10),
        check_out=date(2024, 5, 15),
        guests=2,
    ):
        return Booking.objects.create(
            booking_id=booking_id,
            room=room,
            guest_name="Maria Santos",
            guest_email="maria@example.com",
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            total_price=Decimal("12500.00"),
            status=status,
        )

    return _make


@pytest.fixture
def front_desk_user(db):
    return User.objects.create_user(
        email="frontdesk@example.com",
        password="FrontDesk123",
        role=User.RoleChoices.FRONT_DESK,
    )
