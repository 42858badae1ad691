"""Post-commit handlers for inventory events."""

from __future__ import annotations

import logging

from .events import InventoryDeducted, StockAlertRaised

logger = logging.getLogger(__name__)


def log_inventory_deducted(event: InventoryDeducted) -> None:
    logger.info(
        f"Inventory deducted for room {event.room_id} "
        f"(booking {event.booking_id}): {event.items_deducted} items, {len(event.errors)} errors"
    )


def log_stock_alert(event: StockAlertRaised) -> None:
    logger.warning(
        f"{event.severity.upper()} stock alert #{event.alert_id}: "
        f"{event.item_name} at {event.level} ({event.alert_type})"
    )


def register_handlers(bus) -> None:
    bus.register_event_handler(InventoryDeducted, log_inventory_deducted)
    bus.register_event_handler(StockAlertRaised, log_stock_alert)
