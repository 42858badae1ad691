"""Room models for the hotel platform."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Room(models.Model):
    """A bookable room. ``status`` is kept in sync by the booking engine."""

    class Status(models.TextChoices):
        AVAILABLE = "available", _("Available")
        BOOKED = "booked", _("Booked")
        MAINTENANCE = "maintenance", _("Maintenance")
        UNAVAILABLE = "unavailable", _("Unavailable")

    name = models.CharField(max_length=255)
    guests = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
        help_text=_("Maximum number of guests the room accommodates."),
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Nightly rate."),
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.AVAILABLE,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["status"], name="rooms_room_status_5d1b2e_idx"),
            models.Index(fields=["price", "id"], name="rooms_room_price_8c4f0a_idx"),
        ]

    def __str__(self) -> str:
        return self.name

    def set_status(self, status: str, *, using: str | None = None) -> bool:
        """Persist a new occupancy status; returns False when nothing changed."""
        if self.status == status:
            return False
        self.status = status
        self.save(update_fields=["status", "updated_at"], using=using)
        return True
