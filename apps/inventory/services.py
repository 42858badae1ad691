"""
Warehouse Deduction Engine

Consumes a room's assigned supplies from the shared warehouse pool.
Each assigned item is handled independently: a missing warehouse row or a
shortfall is a soft per-item failure collected in the result, while any
database error propagates and rolls back every write of the call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union
import logging

from django.db import DEFAULT_DB_ALIAS  # type: ignore

from apps.rooms.exceptions import RoomNotFoundError
from apps.rooms.models import Room
from shared.application.uow import DjangoUnitOfWork
from shared.infrastructure.db import lock_for_update

from .alerts import StockAlertGenerator
from .events import InventoryDeducted, StockAlertRaised
from .models import InventoryLedgerEntry, RoomInventoryAssignment, WarehouseStock

logger = logging.getLogger(__name__)

DEFAULT_DEDUCTION_REASON = "Room inventory deduction"


@dataclass(frozen=True)
class DeductionRequest:
    room_id: int
    booking_id: Optional[str] = None
    reason: str = ""


@dataclass(frozen=True)
class ItemDeducted:
    item_id: int
    item_name: str
    quantity: int
    resulting_level: int
    ledger_entry_id: int
    alert_id: Optional[int] = None
    alert_type: Optional[str] = None
    alert_severity: Optional[str] = None


@dataclass(frozen=True)
class ItemFailed:
    item_id: int
    item_name: str
    error: str

    def describe(self) -> str:
        return f"{self.item_name}: {self.error}"


@dataclass
class DeductionResult:
    """
    Outcome of one deduction call

    ``succeeded`` and ``failed`` partition the room's assigned items.
    A result with failures is still a successful call.
    """
    room_id: int
    succeeded: List[ItemDeducted] = field(default_factory=list)
    failed: List[ItemFailed] = field(default_factory=list)
    message: str = ""

    @classmethod
    def fold(cls, room_id: int, outcomes: Iterable[Union[ItemDeducted, ItemFailed]]) -> "DeductionResult":
        result = cls(room_id=room_id)
        for outcome in outcomes:
            if isinstance(outcome, ItemFailed):
                result.failed.append(outcome)
            else:
                result.succeeded.append(outcome)

        result.message = (
            f"Deducted {len(result.succeeded)} of "
            f"{len(result.succeeded) + len(result.failed)} items for room {room_id}"
        )
        return result

    @property
    def items_deducted(self) -> int:
        return len(self.succeeded)

    @property
    def errors(self) -> List[str]:
        return [failure.describe() for failure in self.failed]

    @property
    def alerts_raised(self) -> List[ItemDeducted]:
        return [item for item in self.succeeded if item.alert_id is not None]

    def to_dict(self) -> dict:
        return {
            'room_id': self.room_id,
            'items_deducted': self.items_deducted,
            'errors': self.errors,
            'message': self.message,
            'items': [
                {
                    'item_id': item.item_id,
                    'item_name': item.item_name,
                    'quantity': item.quantity,
                    'resulting_level': item.resulting_level,
                    'alert_type': item.alert_type,
                }
                for item in self.succeeded
            ],
        }


class WarehouseDeductionEngine:
    """
    Applies room inventory deductions against ``WarehouseStock``

    Runs in its own unit of work. Called inside a booking transition it
    nests as a savepoint, so a hard failure here rolls back the whole
    transition and its events are only published once that commits.
    """

    def __init__(self, alert_generator: StockAlertGenerator | None = None, using: str = DEFAULT_DB_ALIAS):
        self.using = using
        self.alert_generator = alert_generator or StockAlertGenerator(using=using)

    def deduct(self, request: DeductionRequest, actor=None) -> DeductionResult:
        return self.deduct_room_inventory(
            request.room_id,
            booking_id=request.booking_id,
            reason=request.reason,
            actor=actor,
        )

    def deduct_room_inventory(self, room_id, booking_id=None, reason="", actor=None) -> DeductionResult:
        room = Room.objects.using(self.using).filter(pk=room_id).first()
        if room is None:
            raise RoomNotFoundError(room_id)

        assignments = list(
            RoomInventoryAssignment.objects.using(self.using)
            .filter(room=room, current_quantity__gt=0)
            .select_related("item")
            .order_by("item_id")
        )
        if not assignments:
            logger.info(f"Room {room.pk} has no assigned inventory, nothing to deduct")
            return DeductionResult(room_id=room.pk, message=f"No inventory assigned to room {room.pk}")

        with DjangoUnitOfWork(using=self.using) as uow:
            # Lock in item order so concurrent deductions can't deadlock
            stock_rows = lock_for_update(
                WarehouseStock.objects.using(self.using)
                .filter(item_id__in=[a.item_id for a in assignments])
                .order_by("item_id"),
                using=self.using,
            )
            stock_by_item = {stock.item_id: stock for stock in stock_rows}

            result = DeductionResult.fold(
                room.pk,
                (
                    self._deduct_item(
                        room,
                        assignment,
                        stock_by_item.get(assignment.item_id),
                        booking_id=booking_id,
                        reason=reason or DEFAULT_DEDUCTION_REASON,
                        actor=actor,
                    )
                    for assignment in assignments
                ),
            )

            uow.record(InventoryDeducted(
                aggregate_id=str(room.pk),
                room_id=room.pk,
                booking_id=booking_id,
                items_deducted=result.items_deducted,
                errors=result.errors,
            ))
            for item in result.alerts_raised:
                uow.record(StockAlertRaised(
                    aggregate_id=str(item.item_id),
                    alert_id=item.alert_id,
                    item_id=item.item_id,
                    item_name=item.item_name,
                    alert_type=item.alert_type,
                    severity=item.alert_severity,
                    level=item.resulting_level,
                ))

        if result.failed:
            logger.warning(
                f"Partial deduction for room {room.pk} (booking {booking_id}): {result.errors}"
            )
        logger.info(result.message)
        return result

    def _deduct_item(self, room, assignment, stock, *, booking_id, reason, actor):
        item = assignment.item
        required = assignment.current_quantity

        if stock is None:
            return ItemFailed(item.pk, item.name, "item not found in warehouse")

        if stock.quantity < required:
            return ItemFailed(
                item.pk,
                item.name,
                f"insufficient stock: available {stock.quantity}, required {required}",
            )

        stock.quantity -= required
        stock.save(update_fields=["quantity", "updated_at"], using=self.using)

        entry = InventoryLedgerEntry(
            item=item,
            delta=-required,
            resulting_level=stock.quantity,
            reason=reason,
            booking_id=booking_id or "",
            note=f"{required} {item.unit} of {item.name} consumed by room {room.name} (#{room.pk})",
            actor=actor,
        )
        entry.save(using=self.using)

        alert = self.alert_generator.raise_for_level(item, stock.quantity)

        return ItemDeducted(
            item_id=item.pk,
            item_name=item.name,
            quantity=required,
            resulting_level=stock.quantity,
            ledger_entry_id=entry.pk,
            alert_id=alert.pk if alert is not None else None,
            alert_type=alert.alert_type if alert is not None else None,
            alert_severity=alert.severity if alert is not None else None,
        )
