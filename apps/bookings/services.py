"""
Booking Lifecycle Service

Applies state-machine plans to the database. Every call is one unit of
work, always in the same order:

    lock + update booking -> update room(s) -> deduct inventory -> alerts

Request validation happens before the transaction opens. Any database
error inside it rolls back every write and surfaces as
BookingTransactionError; soft inventory shortfalls ride along in the
result instead.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from uuid import uuid4
import logging

from django.conf import settings  # type: ignore
from django.db import DEFAULT_DB_ALIAS, DatabaseError, IntegrityError  # type: ignore
from django.utils import timezone  # type: ignore

from apps.inventory.services import WarehouseDeductionEngine
from apps.rooms.exceptions import RoomNotFoundError
from apps.rooms.models import Room
from shared.application.uow import DjangoUnitOfWork
from shared.infrastructure.db import lock_for_update

from .application.commands import CreateBookingCommand, TransitionRequest, TransitionResult
from .domain.events import BookingCreated, BookingDeleted, BookingStatusChanged
from .domain.state_machine import ROOM_AVAILABLE, TransitionPlan, plan_creation, plan_transition
from .domain.status import ROOM_RELEASING_ON_DELETE, BookingStatus, parse_status
from .exceptions import (
    BookingNotFoundError,
    BookingTransactionError,
    BookingValidationError,
    DuplicateBookingError,
)
from .models import Booking

logger = logging.getLogger(__name__)

ALREADY_DEDUCTED_MESSAGE = "Inventory already deducted for this stay"


def generate_walk_in_booking_id() -> str:
    prefix = getattr(settings, "HOTEL_ENGINE", {}).get("WALK_IN_BOOKING_PREFIX", "WALKIN-")
    return f"{prefix}{timezone.now():%Y%m%d%H%M%S}-{uuid4().hex[:6].upper()}"


class BookingLifecycleService:
    """Drives bookings through the state machine on the given database alias."""

    def __init__(self, deduction_engine: WarehouseDeductionEngine | None = None, using: str = DEFAULT_DB_ALIAS):
        self.using = using
        self.deduction_engine = deduction_engine or WarehouseDeductionEngine(using=using)

    # ----- creation -----

    def create_booking(self, command: CreateBookingCommand, actor=None) -> TransitionResult:
        status = self._parse_status(command.status)
        booking_id = (command.booking_id or "").strip()
        if not booking_id:
            raise BookingValidationError("booking_id is required")

        self._validate_stay(command)
        room = self._get_room(command.room_id) if command.room_id is not None else None
        if room is not None and command.guests > room.guests:
            raise BookingValidationError(
                f"Room {room.pk} accommodates {room.guests} guests, requested {command.guests}"
            )
        plan = plan_creation(status, has_room=room is not None)

        if Booking.objects.using(self.using).filter(booking_id=booking_id).exists():
            raise DuplicateBookingError(f"Booking {booking_id} already exists")

        logger.info(f"Creating booking {booking_id} ({status.value}) for room {command.room_id}")

        try:
            with DjangoUnitOfWork(using=self.using) as uow:
                booking = Booking(
                    booking_id=booking_id,
                    room=room,
                    guest_name=command.guest_name.strip(),
                    guest_email=(command.guest_email or "").strip(),
                    guest_phone=(command.guest_phone or "").strip(),
                    check_in=command.check_in,
                    check_out=command.check_out,
                    guests=command.guests,
                    total_price=command.total_price,
                    status=status,
                    source=command.source,
                )
                booking.save(using=self.using)

                if room is not None and plan.room_status:
                    room.set_status(plan.room_status, using=self.using)

                inventory = self._deduct(plan, booking, room, actor)

                uow.record(BookingCreated(
                    aggregate_id=booking.booking_id,
                    booking_id=booking.booking_id,
                    room_id=booking.room_id,
                    status=booking.status,
                    source=booking.source,
                ))
        except IntegrityError as e:
            if Booking.objects.using(self.using).filter(booking_id=booking_id).exists():
                logger.warning(f"Booking {booking_id} was created concurrently, rolled back")
                raise DuplicateBookingError(f"Booking {booking_id} already exists") from e
            logger.error(f"Creating booking {booking_id} failed, rolled back: {e}", exc_info=True)
            raise BookingTransactionError(f"Could not create booking {booking_id}") from e
        except DatabaseError as e:
            logger.error(f"Creating booking {booking_id} failed, rolled back: {e}", exc_info=True)
            raise BookingTransactionError(f"Could not create booking {booking_id}") from e

        return TransitionResult(
            booking=booking,
            previous_status=status.value,
            status=status.value,
            room_id=booking.room_id,
            previous_room_id=None,
            inventory=inventory,
            message=inventory.message if inventory is not None else f"Booking {booking_id} created",
        )

    def create_walk_in(self, command: CreateBookingCommand, actor=None) -> TransitionResult:
        """Guest arrives without a reservation: created straight at checked_in."""
        if command.room_id is None:
            raise BookingValidationError("room_id is required for a walk-in booking")

        walk_in = CreateBookingCommand(
            booking_id=generate_walk_in_booking_id(),
            guest_name=command.guest_name,
            guest_email=command.guest_email,
            guest_phone=command.guest_phone,
            check_in=command.check_in,
            check_out=command.check_out,
            room_id=command.room_id,
            guests=command.guests,
            total_price=command.total_price,
            status=BookingStatus.CHECKED_IN,
            source=Booking.Source.WALK_IN,
        )
        return self.create_booking(walk_in, actor=actor)

    # ----- transitions -----

    def transition(self, request: TransitionRequest, actor=None) -> TransitionResult:
        if request.new_status in (None, "") and request.new_room_id is None:
            raise BookingValidationError("new_status or new_room_id is required")

        target = self._parse_status(request.new_status) if request.new_status not in (None, "") else None
        new_room = self._get_room(request.new_room_id) if request.new_room_id is not None else None
        if new_room is not None:
            self._check_capacity(request.booking_id, new_room)

        try:
            with DjangoUnitOfWork(using=self.using) as uow:
                booking = self._lock_booking(request.booking_id)
                previous = booking.status_enum
                target = target or previous
                previous_room = booking.room

                room_changed = new_room is not None and new_room.pk != booking.room_id
                current_room = new_room if room_changed else previous_room

                plan = plan_transition(
                    previous,
                    target,
                    has_room=current_room is not None,
                    room_changed=room_changed,
                )

                booking.status = plan.target
                update_fields = ["status", "updated_at"]
                if room_changed:
                    booking.room = new_room
                    update_fields.append("room")
                booking.save(update_fields=update_fields, using=self.using)

                if plan.release_previous_room and previous_room is not None:
                    previous_room.set_status(ROOM_AVAILABLE, using=self.using)
                if plan.room_status and current_room is not None:
                    current_room.set_status(plan.room_status, using=self.using)

                inventory = self._deduct(plan, booking, current_room, actor)

                uow.record(BookingStatusChanged(
                    aggregate_id=booking.booking_id,
                    booking_id=booking.booking_id,
                    previous_status=previous.value,
                    status=plan.target.value,
                    room_id=booking.room_id,
                    previous_room_id=previous_room.pk if previous_room is not None else None,
                ))
        except DatabaseError as e:
            logger.error(f"Transition of booking {request.booking_id} failed, rolled back: {e}", exc_info=True)
            raise BookingTransactionError(f"Could not update booking {request.booking_id}") from e

        logger.info(
            f"Booking {booking.booking_id}: {previous.value} -> {plan.target.value}"
            + (f", room {previous_room.pk if previous_room else None} -> {new_room.pk}" if room_changed else "")
        )

        return TransitionResult(
            booking=booking,
            previous_status=previous.value,
            status=plan.target.value,
            room_id=booking.room_id,
            previous_room_id=previous_room.pk if previous_room is not None else None,
            inventory=inventory,
            already_deducted=plan.already_deducted,
            message=self._message_for(plan, inventory),
        )

    def check_in(self, booking_id: str, actor=None) -> TransitionResult:
        return self.transition(TransitionRequest(booking_id=booking_id, new_status=BookingStatus.CHECKED_IN), actor=actor)

    def check_out(self, booking_id: str, actor=None) -> TransitionResult:
        return self.transition(TransitionRequest(booking_id=booking_id, new_status=BookingStatus.COMPLETED), actor=actor)

    # ----- deletion -----

    def delete_booking(self, booking_id: str) -> bool:
        """Remove a booking; returns whether its room was released."""
        try:
            with DjangoUnitOfWork(using=self.using) as uow:
                booking = self._lock_booking(booking_id)
                previous = booking.status_enum
                room = booking.room

                booking.delete(using=self.using)

                released = previous in ROOM_RELEASING_ON_DELETE and room is not None
                if released:
                    room.set_status(ROOM_AVAILABLE, using=self.using)

                uow.record(BookingDeleted(
                    aggregate_id=booking_id,
                    booking_id=booking_id,
                    previous_status=previous.value,
                    room_id=room.pk if room is not None else None,
                    room_released=released,
                ))
        except DatabaseError as e:
            logger.error(f"Deleting booking {booking_id} failed, rolled back: {e}", exc_info=True)
            raise BookingTransactionError(f"Could not delete booking {booking_id}") from e

        logger.info(f"Booking {booking_id} deleted (was {previous.value}), room released: {released}")
        return released

    # ----- helpers -----

    def _lock_booking(self, booking_id: str) -> Booking:
        queryset = lock_for_update(
            Booking.objects.using(self.using).filter(booking_id=booking_id),
            using=self.using,
        )
        booking = queryset.first()
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def _get_room(self, room_id) -> Room:
        room = Room.objects.using(self.using).filter(pk=room_id).first()
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def _check_capacity(self, booking_id: str, new_room: Room) -> None:
        row = Booking.objects.using(self.using).filter(booking_id=booking_id).values_list("room_id", "guests").first()
        if row is None:
            raise BookingNotFoundError(booking_id)
        room_id, guests = row
        if room_id != new_room.pk and guests > new_room.guests:
            raise BookingValidationError(
                f"Room {new_room.pk} accommodates {new_room.guests} guests, booking has {guests}"
            )

    def _deduct(self, plan: TransitionPlan, booking: Booking, room, actor):
        if not plan.deduct or room is None:
            return None
        return self.deduction_engine.deduct_room_inventory(
            room.pk,
            booking_id=booking.booking_id,
            reason=f"Booking {booking.booking_id} {plan.target.label.lower()}",
            actor=actor,
        )

    @staticmethod
    def _message_for(plan: TransitionPlan, inventory) -> str:
        if inventory is not None:
            return inventory.message
        if plan.already_deducted:
            return ALREADY_DEDUCTED_MESSAGE
        return f"Booking is {plan.target.value}"

    @staticmethod
    def _parse_status(value) -> BookingStatus:
        try:
            return parse_status(value)
        except ValueError:
            raise BookingValidationError(f"Unknown booking status '{value}'")

    @staticmethod
    def _validate_stay(command: CreateBookingCommand) -> None:
        if not (command.guest_name or "").strip():
            raise BookingValidationError("guest_name is required")
        if not (command.guest_email or "").strip() and not (command.guest_phone or "").strip():
            raise BookingValidationError("guest_email or guest_phone is required")
        if not isinstance(command.check_in, date) or not isinstance(command.check_out, date):
            raise BookingValidationError("check_in and check_out dates are required")
        if command.check_in >= command.check_out:
            raise BookingValidationError("check_out must be after check_in")
        if command.guests is None or command.guests < 1:
            raise BookingValidationError("guests must be at least 1")
        try:
            price = Decimal(command.total_price)
        except (InvalidOperation, TypeError, ValueError):
            raise BookingValidationError("total_price must be a number")
        if price < 0:
            raise BookingValidationError("total_price cannot be negative")
