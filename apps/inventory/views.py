"""API views for inventory alerts, the stock ledger and reports."""

from __future__ import annotations

from django.http import HttpResponse  # type: ignore
from django.utils import timezone  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.permissions import IsHotelStaff

from .filters import InventoryAlertFilterSet, InventoryLedgerFilterSet
from .models import InventoryAlert, InventoryLedgerEntry
from .reports import build_consumption_report, export_consumption_csv, resolve_report_days
from .serializers import InventoryAlertSerializer, InventoryLedgerEntrySerializer


class InventoryAlertViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = InventoryAlert.objects.select_related("item").all()
    serializer_class = InventoryAlertSerializer
    permission_classes = [IsHotelStaff]
    filterset_class = InventoryAlertFilterSet


class InventoryLedgerViewSet(viewsets.ReadOnlyModelViewSet):
    """Stock movements, newest first. Append-only, so no write routes."""

    queryset = InventoryLedgerEntry.objects.select_related("item", "actor").all()
    serializer_class = InventoryLedgerEntrySerializer
    permission_classes = [IsHotelStaff]
    filterset_class = InventoryLedgerFilterSet


class InventoryReportView(APIView):
    permission_classes = [IsHotelStaff]

    def get(self, request):  # type: ignore
        return Response(build_consumption_report(request.query_params.get("days")))


class InventoryReportExportView(APIView):
    permission_classes = [IsHotelStaff]

    def get(self, request):  # type: ignore
        days = resolve_report_days(request.query_params.get("days"))
        response = HttpResponse(export_consumption_csv(days), content_type="text/csv")
        filename = f"inventory-report-{days}days-{timezone.localdate():%Y%m%d}.csv"
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        return response
