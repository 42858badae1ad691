"""
Inventory Domain Events

Published after the transaction that produced them commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class InventoryDeducted(DomainEvent):
    """A room's supplies were consumed from the warehouse"""
    room_id: int
    booking_id: str | None
    items_deducted: int
    errors: list


@dataclass(kw_only=True)
class StockAlertRaised(DomainEvent):
    """A warehouse level crossed the low-stock or out-of-stock threshold"""
    alert_id: int
    item_id: int
    item_name: str
    alert_type: str
    severity: str
    level: int
