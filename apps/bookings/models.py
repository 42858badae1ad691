"""Booking domain models for the hotel platform."""

from __future__ import annotations

from decimal import Decimal

from django.db import models  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .domain.status import (
    AVAILABILITY_BLOCKING_STATUSES,
    OCCUPYING_STATUSES,
    TERMINAL_STATUSES,
    BookingStatus,
)


class BookingQuerySet(models.QuerySet):
    def blocking_availability(self):
        return self.filter(status__in=AVAILABILITY_BLOCKING_STATUSES)

    def overlapping(self, check_in, check_out):
        """Half-open overlap with [check_in, check_out); back-to-back stays don't match."""
        return self.filter(check_in__lt=check_out, check_out__gt=check_in)


class Booking(models.Model):
    """A guest's reservation of a room. Mutated only by the lifecycle service."""

    Status = BookingStatus

    class Source(models.TextChoices):
        WEB = "web", _("Website")
        WALK_IN = "walk_in", _("Walk-in")
        ADMIN = "admin", _("Admin panel")

    booking_id = models.CharField(
        max_length=64,
        unique=True,
        help_text=_("Externally generated booking reference."),
    )
    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    guest_name = models.CharField(max_length=255)
    guest_email = models.EmailField(blank=True)
    guest_phone = models.CharField(max_length=32, blank=True)
    check_in = models.DateField()
    check_out = models.DateField()
    guests = models.PositiveSmallIntegerField(default=1)
    total_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    status = models.CharField(
        max_length=20,
        choices=BookingStatus.choices,
        default=BookingStatus.PENDING,
    )
    source = models.CharField(
        max_length=20,
        choices=Source.choices,
        default=Source.WEB,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=Q(check_out__gt=models.F("check_in")),
                name="booking_valid_dates",
            ),
            models.CheckConstraint(
                condition=Q(total_price__gte=0),
                name="booking_non_negative_price",
            ),
            models.CheckConstraint(
                condition=Q(guests__gte=1),
                name="booking_positive_guests",
            ),
            models.CheckConstraint(
                condition=~Q(guest_email="") | ~Q(guest_phone=""),
                name="booking_has_contact",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "check_in", "check_out"], name="bookings_room_dates_idx"),
            models.Index(fields=["status"], name="bookings_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.booking_id} ({self.status})"

    @property
    def status_enum(self) -> BookingStatus:
        return BookingStatus(self.status)

    @property
    def is_occupying(self) -> bool:
        return self.status in OCCUPYING_STATUSES

    @property
    def is_closed(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def guest_contact(self) -> str:
        return self.guest_email or self.guest_phone

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days
