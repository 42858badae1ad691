"""Admin registration for rooms."""

from __future__ import annotations

from django.contrib import admin

from .models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("name", "guests", "price", "status", "updated_at")
    list_filter = ("status",)
    search_fields = ("name",)
