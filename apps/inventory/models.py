"""Inventory domain models for housekeeping supplies."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .exceptions import LedgerImmutableError


class InventoryItem(models.Model):
    """Reference data for a supply item (towels, toiletries, minibar)."""

    name = models.CharField(max_length=255, unique=True)
    category = models.CharField(max_length=100, blank=True)
    unit = models.CharField(max_length=20, default="pcs", help_text=_("Unit of measure."))
    unit_cost = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))
    low_stock_threshold = models.PositiveIntegerField(default=10)
    reorder_quantity = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Inventory item")
        verbose_name_plural = _("Inventory items")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class RoomInventoryAssignment(models.Model):
    """Quantity of an item a room is provisioned with per stay."""

    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.CASCADE,
        related_name="inventory_assignments",
    )
    item = models.ForeignKey(
        InventoryItem,
        on_delete=models.PROTECT,
        related_name="room_assignments",
    )
    current_quantity = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room inventory")
        verbose_name_plural = _("Room inventory")
        constraints = [
            models.UniqueConstraint(fields=["room", "item"], name="room_inventory_unique_item"),
        ]

    def __str__(self) -> str:
        return f"{self.room_id}: {self.item_id} x{self.current_quantity}"


class WarehouseStock(models.Model):
    """Central pool for one item. Never negative."""

    item = models.OneToOneField(
        InventoryItem,
        on_delete=models.CASCADE,
        related_name="warehouse_stock",
    )
    quantity = models.IntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Warehouse stock")
        verbose_name_plural = _("Warehouse stock")
        constraints = [
            models.CheckConstraint(condition=Q(quantity__gte=0), name="warehouse_stock_non_negative"),
        ]

    def __str__(self) -> str:
        return f"{self.item_id}: {self.quantity}"

    @property
    def is_low(self) -> bool:
        return self.quantity <= self.item.low_stock_threshold


class LedgerQuerySet(models.QuerySet):
    def update(self, **kwargs):  # type: ignore
        raise LedgerImmutableError("Inventory ledger entries cannot be updated")

    def delete(self):  # type: ignore
        raise LedgerImmutableError("Inventory ledger entries cannot be deleted")


class InventoryLedgerEntry(models.Model):
    """
    Immutable movement log: one row per warehouse stock change.
    """

    item = models.ForeignKey(
        InventoryItem,
        on_delete=models.PROTECT,
        related_name="ledger_entries",
    )
    delta = models.IntegerField()  # signed
    resulting_level = models.IntegerField()
    reason = models.CharField(max_length=255)
    booking_id = models.CharField(max_length=64, blank=True, db_index=True)
    note = models.TextField(blank=True)
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="inventory_ledger_entries",
    )
    created_at = models.DateTimeField(default=timezone.now)

    objects = LedgerQuerySet.as_manager()

    class Meta:
        verbose_name = _("Inventory ledger entry")
        verbose_name_plural = _("Inventory ledger")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["item", "created_at"], name="inventory_ledger_item_idx"),
        ]

    def __str__(self) -> str:
        return f"Ledger {self.item_id} {self.delta:+d} -> {self.resulting_level}"

    def save(self, *args, **kwargs):  # type: ignore
        if not self._state.adding:
            raise LedgerImmutableError("Inventory ledger entries cannot be updated")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):  # type: ignore
        raise LedgerImmutableError("Inventory ledger entries cannot be deleted")


class InventoryAlert(models.Model):
    """Stock alert raised when the warehouse level crosses a threshold."""

    class AlertType(models.TextChoices):
        LOW_STOCK = "low_stock", _("Low stock")
        OUT_OF_STOCK = "out_of_stock", _("Out of stock")

    class Severity(models.TextChoices):
        WARNING = "warning", _("Warning")
        CRITICAL = "critical", _("Critical")

    item = models.ForeignKey(
        InventoryItem,
        on_delete=models.CASCADE,
        related_name="alerts",
    )
    alert_type = models.CharField(max_length=20, choices=AlertType.choices)
    severity = models.CharField(max_length=20, choices=Severity.choices)
    message = models.CharField(max_length=255)
    is_resolved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Inventory alert")
        verbose_name_plural = _("Inventory alerts")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["is_resolved", "severity"], name="inventory_alert_open_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.get_severity_display()}: {self.message}"
