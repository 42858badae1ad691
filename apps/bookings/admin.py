"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    """Bookings are created, moved and deleted only through the lifecycle service."""

    list_display = (
        "booking_id",
        "room",
        "guest_name",
        "status",
        "source",
        "check_in",
        "check_out",
        "total_price",
        "created_at",
    )
    list_filter = ("status", "source", "check_in", "check_out")
    search_fields = ("booking_id", "guest_name", "guest_email", "guest_phone")
    readonly_fields = (
        "booking_id",
        "room",
        "status",
        "created_at",
        "updated_at",
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
