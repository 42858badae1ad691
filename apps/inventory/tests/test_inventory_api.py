"""Integration tests for inventory alert, ledger and report endpoints."""

from __future__ import annotations

from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.inventory.models import InventoryAlert, InventoryItem, RoomInventoryAssignment, WarehouseStock
from apps.inventory.services import WarehouseDeductionEngine
from apps.rooms.models import Room
from apps.users.models import User


class InventoryAPITests(APITestCase):
    def setUp(self) -> None:
        self.housekeeper = User.objects.create_user(
            email="housekeeping@example.com",
            password="Housekeeping123",
            role=User.RoleChoices.HOUSEKEEPING,
        )
        self.room = Room.objects.create(name="Suite 501", guests=4, price=Decimal("8000.00"))
        self.towel = InventoryItem.objects.create(name="Towel", low_stock_threshold=10, unit_cost=Decimal("40.00"))
        self.soap = InventoryItem.objects.create(name="Soap", low_stock_threshold=1, unit_cost=Decimal("12.00"))
        WarehouseStock.objects.create(item=self.towel, quantity=12)
        WarehouseStock.objects.create(item=self.soap, quantity=1)
        RoomInventoryAssignment.objects.create(room=self.room, item=self.towel, current_quantity=4)
        RoomInventoryAssignment.objects.create(room=self.room, item=self.soap, current_quantity=1)
        WarehouseDeductionEngine().deduct_room_inventory(self.room.pk, booking_id="BK-77", reason="Check-in")

    def test_endpoints_require_staff(self) -> None:
        response = self.client.get(reverse("inventory-alert-list"))

        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_alerts_filter_by_severity(self) -> None:
        self.client.force_authenticate(self.housekeeper)

        critical = self.client.get(reverse("inventory-alert-list"), {"severity": "critical"})
        warning = self.client.get(reverse("inventory-alert-list"), {"severity": "warning"})

        self.assertEqual(critical.status_code, status.HTTP_200_OK, critical.data)
        self.assertEqual([a["item_name"] for a in critical.data], ["Soap"])
        self.assertEqual(critical.data[0]["alert_type"], InventoryAlert.AlertType.OUT_OF_STOCK)
        self.assertEqual([a["item_name"] for a in warning.data], ["Towel"])

    def test_ledger_filter_by_booking(self) -> None:
        self.client.force_authenticate(self.housekeeper)

        response = self.client.get(reverse("inventory-ledger-list"), {"booking_id": "BK-77"})
        other = self.client.get(reverse("inventory-ledger-list"), {"booking_id": "BK-00"})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(sorted(e["delta"] for e in response.data), [-4, -1])
        self.assertEqual(other.data, [])

    def test_ledger_is_read_only(self) -> None:
        self.client.force_authenticate(self.housekeeper)

        response = self.client.post(reverse("inventory-ledger-list"), {"delta": 5}, format="json")

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_report(self) -> None:
        self.client.force_authenticate(self.housekeeper)

        response = self.client.get(reverse("inventory-report"), {"days": 7})

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["days"], 7)
        self.assertEqual(response.data["summary"]["total_transactions"], 2)
        self.assertEqual(response.data["summary"]["low_stock_items"], 2)
        self.assertEqual(response.data["most_used_items"][0]["name"], "Towel")

    def test_report_rejects_bad_window(self) -> None:
        self.client.force_authenticate(self.housekeeper)

        response = self.client.get(reverse("inventory-report"), {"days": 0})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "invalid_report")

    def test_csv_export(self) -> None:
        self.client.force_authenticate(self.housekeeper)

        response = self.client.get(reverse("inventory-report-export"), {"days": 30})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response["Content-Type"], "text/csv")
        self.assertIn('filename="inventory-report-30days-', response["Content-Disposition"])
        lines = response.content.decode().splitlines()
        self.assertEqual(lines[0], "item_id,name,category,unit,unit_cost,total_used,total_cost")
        self.assertEqual(len(lines), 3)
