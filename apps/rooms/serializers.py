"""Serializers for rooms and availability queries."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Room


class RoomSerializer(serializers.ModelSerializer):
    class Meta:
        model = Room
        fields = ["id", "name", "guests", "price", "status"]
        read_only_fields = fields


class AvailabilityQuerySerializer(serializers.Serializer):
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    guests = serializers.IntegerField(min_value=1, default=1)

    def validate(self, attrs):  # type: ignore
        if attrs["check_in"] >= attrs["check_out"]:
            raise serializers.ValidationError({"check_out": "Check-out must be after check-in."})
        return attrs


class OccupiedRangeSerializer(serializers.Serializer):
    booking_id = serializers.CharField()
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    status = serializers.CharField()
