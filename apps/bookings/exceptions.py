"""Errors raised by the booking lifecycle engine."""

from __future__ import annotations

from shared.domain.exceptions import (
    ConflictError,
    DomainValidationError,
    NotFoundError,
    TransactionFailedError,
)


class BookingNotFoundError(NotFoundError):
    """Booking not found"""
    code = "booking_not_found"

    def __init__(self, booking_id=None):
        super().__init__(f"Booking {booking_id} not found" if booking_id is not None else "")
        self.booking_id = booking_id


class BookingValidationError(DomainValidationError):
    """Invalid booking request"""
    code = "invalid_booking"


class InvalidTransitionError(ConflictError):
    """Booking status transition is not allowed"""
    code = "invalid_transition"

    def __init__(self, previous: str, target: str, reason: str = ""):
        message = f"Cannot move booking from '{previous}' to '{target}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.previous = previous
        self.target = target


class BookingTransactionError(TransactionFailedError):
    """Booking transition failed and was rolled back"""
    code = "booking_transaction_failed"


class DuplicateBookingError(ConflictError):
    """Booking with this id already exists"""
    code = "duplicate_booking"
