"""
Stock Alert Generator

Decides whether a warehouse level warrants an alert and persists it.
Alerting is best-effort: a failed insert is logged and never breaks the
deduction that triggered it.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction  # type: ignore

from .models import InventoryAlert, InventoryItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertDecision:
    alert_type: str
    severity: str
    message: str


def evaluate_stock_level(
    item_name: str,
    new_level: int,
    threshold: int,
    unit: str = "pcs",
) -> AlertDecision | None:
    """
    Pure threshold check

    0 -> out_of_stock/critical, 0 < level <= threshold -> low_stock/warning,
    anything above the threshold -> None.
    """
    if new_level <= 0:
        return AlertDecision(
            alert_type=InventoryAlert.AlertType.OUT_OF_STOCK,
            severity=InventoryAlert.Severity.CRITICAL,
            message=f"{item_name} is out of stock",
        )
    if new_level <= threshold:
        return AlertDecision(
            alert_type=InventoryAlert.AlertType.LOW_STOCK,
            severity=InventoryAlert.Severity.WARNING,
            message=f"{item_name} is running low ({new_level} {unit} left)",
        )
    return None


class StockAlertGenerator:
    """Persists alert decisions on the given database alias."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def raise_for_level(self, item: InventoryItem, new_level: int) -> InventoryAlert | None:
        decision = evaluate_stock_level(
            item.name,
            new_level,
            item.low_stock_threshold,
            unit=item.unit,
        )
        if decision is None:
            return None

        try:
            # Savepoint: a failed insert must not poison the outer transaction
            with transaction.atomic(using=self.using):
                alert = InventoryAlert.objects.using(self.using).create(
                    item=item,
                    alert_type=decision.alert_type,
                    severity=decision.severity,
                    message=decision.message,
                )
        except DatabaseError as e:
            logger.error(
                f"Failed to record {decision.alert_type} alert for item {item.pk}: {e}",
                exc_info=True,
            )
            return None

        logger.warning(
            f"Stock alert {alert.alert_type} ({alert.severity}) for item {item.pk}: {alert.message}"
        )
        return alert
