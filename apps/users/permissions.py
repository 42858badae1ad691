"""Role checks consulted by the booking and inventory APIs."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore


class IsHotelStaff(permissions.BasePermission):
    """Front desk, housekeeping and administrators."""

    message = "Hotel staff role required."

    def has_permission(self, request, view) -> bool:  # type: ignore
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return hasattr(user, "is_hotel_staff") and user.is_hotel_staff()


class IsHotelStaffOrCreateOnly(IsHotelStaff):
    """Anyone may submit a booking; everything else needs a staff role."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        if getattr(view, "action", None) == "create":
            return True
        return super().has_permission(request, view)
