"""FilterSet definitions for booking listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .domain.status import BookingStatus
from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    """``?status=all`` (or no status) lists every booking."""

    status = django_filters.CharFilter(method="filter_status")
    room = django_filters.NumberFilter(field_name="room_id", lookup_expr="exact")
    check_in_from = django_filters.DateFilter(field_name="check_in", lookup_expr="gte")
    check_in_to = django_filters.DateFilter(field_name="check_in", lookup_expr="lte")
    source = django_filters.ChoiceFilter(choices=Booking.Source.choices)

    class Meta:
        model = Booking
        fields = ["status", "room", "source"]

    def filter_status(self, queryset, name, value):  # type: ignore
        value = (value or "").strip().lower()
        if not value or value == "all":
            return queryset
        statuses = [s for s in value.split(",") if s in BookingStatus.values]
        return queryset.filter(status__in=statuses)
