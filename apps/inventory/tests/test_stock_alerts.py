"""Tests for threshold alerting."""

from __future__ import annotations

from unittest import mock

import pytest
from django.db import DatabaseError

from apps.inventory.alerts import StockAlertGenerator, evaluate_stock_level
from apps.inventory.models import InventoryAlert
from apps.inventory.services import WarehouseDeductionEngine


@pytest.mark.parametrize(
    "level, expected",
    [
        (0, ("out_of_stock", "critical")),
        (1, ("low_stock", "warning")),
        (10, ("low_stock", "warning")),
        (11, None),
    ],
)
def test_evaluate_stock_level(level, expected):
    decision = evaluate_stock_level("Bath towel", level, threshold=10)

    if expected is None:
        assert decision is None
    else:
        assert (decision.alert_type, decision.severity) == expected
        assert "Bath towel" in decision.message


@pytest.mark.django_db
@pytest.mark.parametrize(
    "start, assigned, expected",
    [
        (12, 4, ("low_stock", "warning")),
        (1, 1, ("out_of_stock", "critical")),
        (20, 5, None),
    ],
)
def test_deduction_raises_threshold_alerts(make_room, make_item, start, assigned, expected):
    room = make_room()
    item = make_item(room=room, assigned=assigned, warehouse=start, threshold=10)

    result = WarehouseDeductionEngine().deduct_room_inventory(room.pk, booking_id="BK-1")

    alerts = list(InventoryAlert.objects.filter(item=item))
    if expected is None:
        assert alerts == []
        assert result.succeeded[0].alert_id is None
    else:
        assert len(alerts) == 1
        assert (alerts[0].alert_type, alerts[0].severity) == expected
        assert alerts[0].is_resolved is False
        assert result.succeeded[0].alert_id == alerts[0].pk


@pytest.mark.django_db
def test_alert_insert_failure_is_swallowed(make_item):
    item = make_item(threshold=10)

    with mock.patch.object(InventoryAlert, "save", side_effect=DatabaseError("locked")):
        alert = StockAlertGenerator().raise_for_level(item, 3)

    assert alert is None
    assert InventoryAlert.objects.count() == 0
