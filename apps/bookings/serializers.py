"""Serializers for the booking domain."""

from __future__ import annotations

from django.utils import timezone  # type: ignore

from rest_framework import serializers  # type: ignore

from .application.commands import CreateBookingCommand, TransitionRequest
from .domain.status import BookingStatus, TERMINAL_STATUSES
from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    """Read-only booking representation."""

    room_id = serializers.ReadOnlyField(source="room.id")
    room_name = serializers.ReadOnlyField(source="room.name")
    nights = serializers.ReadOnlyField()

    class Meta:
        model = Booking
        fields = [
            "booking_id",
            "room_id",
            "room_name",
            "guest_name",
            "guest_email",
            "guest_phone",
            "check_in",
            "check_out",
            "nights",
            "guests",
            "total_price",
            "status",
            "source",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    """Web reservation submitted with a client-generated booking id."""

    booking_id = serializers.CharField(max_length=64)
    room_id = serializers.IntegerField(required=False, allow_null=True)
    guest_name = serializers.CharField(max_length=255)
    guest_email = serializers.EmailField(required=False, allow_blank=True, default="")
    guest_phone = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    guests = serializers.IntegerField(min_value=1, default=1)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, default=0)
    status = serializers.ChoiceField(
        choices=[c for c in BookingStatus.choices if c[0] not in TERMINAL_STATUSES],
        default=BookingStatus.PENDING,
    )

    def validate(self, attrs):  # type: ignore
        if attrs["check_in"] >= attrs["check_out"]:
            raise serializers.ValidationError({"check_out": "Check-out must be after check-in."})
        if not attrs.get("guest_email") and not attrs.get("guest_phone"):
            raise serializers.ValidationError("Provide guest_email or guest_phone.")
        return attrs

    def to_command(self, source: str = Booking.Source.WEB) -> CreateBookingCommand:
        data = self.validated_data
        return CreateBookingCommand(
            booking_id=data.get("booking_id", ""),
            room_id=data.get("room_id"),
            guest_name=data["guest_name"],
            guest_email=data.get("guest_email", ""),
            guest_phone=data.get("guest_phone", ""),
            check_in=data["check_in"],
            check_out=data["check_out"],
            guests=data["guests"],
            total_price=data["total_price"],
            status=data.get("status", BookingStatus.PENDING),
            source=source,
        )


class WalkInBookingSerializer(BookingCreateSerializer):
    """Front-desk walk-in: id is generated, stay starts today by default."""

    booking_id = None
    status = None
    room_id = serializers.IntegerField()
    check_in = serializers.DateField(required=False)

    def validate(self, attrs):  # type: ignore
        attrs.setdefault("check_in", timezone.localdate())
        return super().validate(attrs)


class BookingTransitionSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=BookingStatus.choices, required=False)
    room_id = serializers.IntegerField(required=False)

    def to_request(self, booking_id: str) -> TransitionRequest:
        data = self.validated_data
        return TransitionRequest(
            booking_id=booking_id,
            new_status=data.get("status"),
            new_room_id=data.get("room_id"),
        )
