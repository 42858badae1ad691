"""API views for room availability."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .models import Room
from .serializers import AvailabilityQuerySerializer, OccupiedRangeSerializer, RoomSerializer
from .services import find_available_rooms, occupied_date_ranges


class RoomViewSet(viewsets.GenericViewSet):
    """Public availability lookups; room management lives in the admin."""

    queryset = Room.objects.all()
    serializer_class = RoomSerializer
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = r"\d+"

    @action(detail=False, methods=["get"])
    def availability(self, request):  # type: ignore
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        rooms = find_available_rooms(
            query.validated_data["check_in"],
            query.validated_data["check_out"],
            query.validated_data["guests"],
        )
        return Response(RoomSerializer(rooms, many=True).data)

    @action(detail=True, methods=["get"], url_path="occupied-dates")
    def occupied_dates(self, request, pk=None):  # type: ignore
        ranges = occupied_date_ranges(pk)
        return Response(OccupiedRangeSerializer(ranges, many=True).data)
