"""API views for the booking domain."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import filters, mixins, serializers, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsHotelStaff, IsHotelStaffOrCreateOnly
from shared.infrastructure.api import request_actor

from .domain.status import BookingStatus
from .filters import BookingFilterSet
from .models import Booking
from .serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    BookingTransitionSerializer,
    WalkInBookingSerializer,
)
from .services import BookingLifecycleService


class BookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Bookings are read directly and mutated only through the lifecycle service."""

    queryset = Booking.objects.select_related("room").all()
    serializer_class = BookingSerializer
    permission_classes = [IsHotelStaffOrCreateOnly]
    lookup_field = "booking_id"
    lookup_value_regex = "[^/]+"
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter, filters.SearchFilter]
    filterset_class = BookingFilterSet
    ordering_fields = ["created_at", "check_in", "check_out", "total_price"]
    search_fields = ["booking_id", "guest_name", "guest_email", "guest_phone"]
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action == "walk_in":
            return WalkInBookingSerializer
        if self.action == "partial_update":
            return BookingTransitionSerializer
        return BookingSerializer

    def get_service(self) -> BookingLifecycleService:
        return BookingLifecycleService()

    def _transition_response(self, result, status_code=status.HTTP_200_OK):
        data = dict(BookingSerializer(result.booking, context=self.get_serializer_context()).data)
        data["previous_status"] = result.previous_status
        data["message"] = result.message
        data["inventory"] = result.inventory_payload()
        return Response(data, status=status_code)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        is_staff = IsHotelStaff().has_permission(request, self)
        if not is_staff and serializer.validated_data["status"] != BookingStatus.PENDING:
            raise serializers.ValidationError({"status": "Reservations are submitted as pending."})
        source = Booking.Source.ADMIN if is_staff else Booking.Source.WEB
        result = self.get_service().create_booking(
            serializer.to_command(source=source),
            actor=request_actor(request),
        )
        return self._transition_response(result, status.HTTP_201_CREATED)

    def partial_update(self, request, booking_id=None):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().transition(
            serializer.to_request(booking_id),
            actor=request_actor(request),
        )
        return self._transition_response(result)

    def destroy(self, request, booking_id=None):  # type: ignore
        self.get_service().delete_booking(booking_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["post"], url_path="walk-in", permission_classes=[IsHotelStaff])
    def walk_in(self, request):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.get_service().create_walk_in(
            serializer.to_command(source=Booking.Source.WALK_IN),
            actor=request_actor(request),
        )
        return self._transition_response(result, status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"], url_path="check-in", permission_classes=[IsHotelStaff])
    def check_in(self, request, booking_id=None):  # type: ignore
        result = self.get_service().check_in(booking_id, actor=request_actor(request))
        return self._transition_response(result)

    @action(detail=True, methods=["post"], url_path="check-out", permission_classes=[IsHotelStaff])
    def check_out(self, request, booking_id=None):  # type: ignore
        result = self.get_service().check_out(booking_id, actor=request_actor(request))
        return self._transition_response(result)
