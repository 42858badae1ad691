"""FilterSet definitions for inventory listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import InventoryAlert, InventoryLedgerEntry


class InventoryAlertFilterSet(django_filters.FilterSet):
    severity = django_filters.ChoiceFilter(choices=InventoryAlert.Severity.choices)
    alert_type = django_filters.ChoiceFilter(choices=InventoryAlert.AlertType.choices)
    is_resolved = django_filters.BooleanFilter()

    class Meta:
        model = InventoryAlert
        fields = ["item", "severity", "alert_type", "is_resolved"]


class InventoryLedgerFilterSet(django_filters.FilterSet):
    booking_id = django_filters.CharFilter(field_name="booking_id", lookup_expr="exact")
    created_from = django_filters.DateTimeFilter(field_name="created_at", lookup_expr="gte")
    created_to = django_filters.DateTimeFilter(field_name="created_at", lookup_expr="lte")

    class Meta:
        model = InventoryLedgerEntry
        fields = ["item", "booking_id"]
