"""Admin registration for inventory."""

from __future__ import annotations

from django.contrib import admin

from .models import (
    InventoryAlert,
    InventoryItem,
    InventoryLedgerEntry,
    RoomInventoryAssignment,
    WarehouseStock,
)


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "unit", "unit_cost", "low_stock_threshold", "reorder_quantity")
    list_filter = ("category",)
    search_fields = ("name",)


@admin.register(RoomInventoryAssignment)
class RoomInventoryAssignmentAdmin(admin.ModelAdmin):
    list_display = ("room", "item", "current_quantity", "updated_at")
    list_filter = ("room",)


@admin.register(WarehouseStock)
class WarehouseStockAdmin(admin.ModelAdmin):
    list_display = ("item", "quantity", "updated_at")
    search_fields = ("item__name",)


@admin.register(InventoryLedgerEntry)
class InventoryLedgerEntryAdmin(admin.ModelAdmin):
    list_display = ("item", "delta", "resulting_level", "reason", "booking_id", "actor", "created_at")
    list_filter = ("item",)
    search_fields = ("booking_id", "reason", "note")

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(InventoryAlert)
class InventoryAlertAdmin(admin.ModelAdmin):
    list_display = ("item", "alert_type", "severity", "is_resolved", "created_at")
    list_filter = ("alert_type", "severity", "is_resolved")
