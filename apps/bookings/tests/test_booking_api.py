"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.inventory.models import InventoryItem, InventoryLedgerEntry, RoomInventoryAssignment, WarehouseStock
from apps.rooms.models import Room
from apps.users.models import User


class BookingAPITests(APITestCase):
    """Covers reservations, walk-ins, transitions and deletion over HTTP."""

    def setUp(self) -> None:
        self.staff = User.objects.create_user(
            email="frontdesk@example.com",
            password="FrontDesk123",
            role=User.RoleChoices.FRONT_DESK,
        )
        self.guest = User.objects.create_user(
            email="guest@example.com",
            password="GuestPass123",
            role=User.RoleChoices.GUEST,
        )
        self.room = Room.objects.create(name="Deluxe 101", guests=2, price=Decimal("2500.00"))
        self.towel = InventoryItem.objects.create(name="Bath towel", low_stock_threshold=1)
        WarehouseStock.objects.create(item=self.towel, quantity=5)
        RoomInventoryAssignment.objects.create(room=self.room, item=self.towel, current_quantity=2)
        self.list_url = reverse("booking-list")

    def _payload(self, booking_id: str = "WEB-1001", **overrides) -> dict:
        check_in = date.today() + timedelta(days=1)
        payload = {
            "booking_id": booking_id,
            "room_id": self.room.id,
            "guest_name": "Maria Santos",
            "guest_email": "maria@example.com",
            "check_in": str(check_in),
            "check_out": str(check_in + timedelta(days=2)),
            "guests": 2,
            "total_price": "5000.00",
        }
        payload.update(overrides)
        return payload

    def _create(self, booking_id: str = "WEB-1001", **overrides) -> Booking:
        response = self.client.post(self.list_url, self._payload(booking_id, **overrides), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return Booking.objects.get(booking_id=booking_id)

    def test_anonymous_guest_can_create_booking(self) -> None:
        response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "pending")
        booking = Booking.objects.get(booking_id="WEB-1001")
        self.assertEqual(booking.source, Booking.Source.WEB)
        self.room.refresh_from_db()
        self.assertEqual(self.room.status, Room.Status.BOOKED)

    def test_anonymous_guest_cannot_skip_pending(self) -> None:
        response = self.client.post(self.list_url, self._payload(status="checked_in"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("status", response.data)
        self.assertFalse(Booking.objects.exists())
        self.assertEqual(WarehouseStock.objects.get(item=self.towel).quantity, 5)
        self.assertFalse(InventoryLedgerEntry.objects.exists())
        self.room.refresh_from_db()
        self.assertEqual(self.room.status, Room.Status.AVAILABLE)

    def test_staff_can_create_confirmed_booking(self) -> None:
        self.client.force_authenticate(self.staff)

        response = self.client.post(self.list_url, self._payload(status="confirmed"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "confirmed")
        self.assertEqual(response.data["source"], Booking.Source.ADMIN)
        self.assertEqual(WarehouseStock.objects.get(item=self.towel).quantity, 3)

    def test_create_requires_contact_channel(self) -> None:
        response = self.client.post(self.list_url, self._payload(guest_email=""), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(Booking.objects.count(), 0)

    def test_duplicate_booking_id_conflicts(self) -> None:
        self._create()

        response = self.client.post(self.list_url, self._payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["code"], "duplicate_booking")

    def test_list_requires_staff(self) -> None:
        self._create()

        anonymous = self.client.get(self.list_url)
        self.assertIn(anonymous.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

        self.client.force_authenticate(self.guest)
        guest_response = self.client.get(self.list_url)
        self.assertEqual(guest_response.status_code, status.HTTP_403_FORBIDDEN)

    def test_status_filter_all_returns_everything(self) -> None:
        self._create("WEB-1")
        self._create("WEB-2")
        self.client.force_authenticate(self.staff)
        self.client.patch(reverse("booking-detail", args=["WEB-2"]), {"status": "cancelled"}, format="json")

        everything = self.client.get(self.list_url, {"status": "all"})
        pending = self.client.get(self.list_url, {"status": "pending"})

        self.assertEqual(len(everything.data), 2)
        self.assertEqual([b["booking_id"] for b in pending.data], ["WEB-1"])

    def test_patch_confirm_reports_inventory(self) -> None:
        self._create()
        self.client.force_authenticate(self.staff)

        response = self.client.patch(
            reverse("booking-detail", args=["WEB-1001"]), {"status": "confirmed"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["previous_status"], "pending")
        self.assertEqual(response.data["status"], "confirmed")
        self.assertEqual(response.data["inventory"]["items_deducted"], 1)
        self.assertEqual(response.data["inventory"]["errors"], [])
        self.assertEqual(WarehouseStock.objects.get(item=self.towel).quantity, 3)

    def test_patch_without_fields_is_bad_request(self) -> None:
        self._create()
        self.client.force_authenticate(self.staff)

        response = self.client.patch(reverse("booking-detail", args=["WEB-1001"]), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)

    def test_patch_unknown_booking_is_not_found(self) -> None:
        self.client.force_authenticate(self.staff)

        response = self.client.patch(reverse("booking-detail", args=["NOPE"]), {"status": "confirmed"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_closed_booking_rejects_transition(self) -> None:
        self._create()
        self.client.force_authenticate(self.staff)
        detail_url = reverse("booking-detail", args=["WEB-1001"])
        self.client.patch(detail_url, {"status": "declined"}, format="json")

        response = self.client.patch(detail_url, {"status": "confirmed"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["code"], "invalid_transition")
        self.assertEqual(Booking.objects.get(booking_id="WEB-1001").status, "declined")
        self.assertEqual(WarehouseStock.objects.get(item=self.towel).quantity, 5)

    def test_walk_in_checks_guest_in_and_deducts(self) -> None:
        self.client.force_authenticate(self.staff)
        payload = self._payload()
        payload.pop("booking_id")

        response = self.client.post(reverse("booking-walk-in"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["status"], "checked_in")
        self.assertTrue(response.data["booking_id"].startswith("WALKIN-"))
        self.assertEqual(response.data["inventory"]["items_deducted"], 1)
        self.assertEqual(WarehouseStock.objects.get(item=self.towel).quantity, 3)

    def test_walk_in_requires_staff(self) -> None:
        payload = self._payload()
        payload.pop("booking_id")

        response = self.client.post(reverse("booking-walk-in"), payload, format="json")

        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))
        self.assertEqual(Booking.objects.count(), 0)

    def test_check_in_then_check_out(self) -> None:
        self._create()
        self.client.force_authenticate(self.staff)

        check_in = self.client.post(reverse("booking-check-in", args=["WEB-1001"]))
        self.assertEqual(check_in.status_code, status.HTTP_200_OK, check_in.data)
        self.assertEqual(check_in.data["inventory"]["items_deducted"], 1)

        check_out = self.client.post(reverse("booking-check-out", args=["WEB-1001"]))
        self.assertEqual(check_out.status_code, status.HTTP_200_OK, check_out.data)
        self.assertEqual(check_out.data["status"], "completed")
        self.assertFalse(check_out.data["inventory"]["already_deducted"])

        self.room.refresh_from_db()
        self.assertEqual(self.room.status, Room.Status.AVAILABLE)
        self.assertEqual(WarehouseStock.objects.get(item=self.towel).quantity, 3)

    def test_second_check_in_reports_already_deducted(self) -> None:
        self._create()
        self.client.force_authenticate(self.staff)
        self.client.patch(reverse("booking-detail", args=["WEB-1001"]), {"status": "approved"}, format="json")

        response = self.client.post(reverse("booking-check-in", args=["WEB-1001"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["inventory"]["already_deducted"])
        self.assertEqual(WarehouseStock.objects.get(item=self.towel).quantity, 3)

    def test_delete_pending_booking_frees_room(self) -> None:
        self._create()
        self.client.force_authenticate(self.staff)

        response = self.client.delete(reverse("booking-detail", args=["WEB-1001"]))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Booking.objects.exists())
        self.room.refresh_from_db()
        self.assertEqual(self.room.status, Room.Status.AVAILABLE)

    def test_ledger_records_acting_staff_member(self) -> None:
        self._create()
        self.client.force_authenticate(self.staff)

        self.client.post(reverse("booking-check-in", args=["WEB-1001"]))

        entry = self.towel.ledger_entries.get()
        self.assertEqual(entry.actor, self.staff)
        self.assertEqual(entry.booking_id, "WEB-1001")
