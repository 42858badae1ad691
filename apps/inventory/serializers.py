"""Serializers for inventory alerts, ledger and reports."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import InventoryAlert, InventoryLedgerEntry


class InventoryAlertSerializer(serializers.ModelSerializer):
    item_name = serializers.ReadOnlyField(source="item.name")

    class Meta:
        model = InventoryAlert
        fields = [
            "id",
            "item",
            "item_name",
            "alert_type",
            "severity",
            "message",
            "is_resolved",
            "created_at",
        ]
        read_only_fields = fields


class InventoryLedgerEntrySerializer(serializers.ModelSerializer):
    item_name = serializers.ReadOnlyField(source="item.name")
    actor_email = serializers.ReadOnlyField(source="actor.email")

    class Meta:
        model = InventoryLedgerEntry
        fields = [
            "id",
            "item",
            "item_name",
            "delta",
            "resulting_level",
            "reason",
            "booking_id",
            "note",
            "actor_email",
            "created_at",
        ]
        read_only_fields = fields

