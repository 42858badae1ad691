"""URL routing for the inventory domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import (
    InventoryAlertViewSet,
    InventoryLedgerViewSet,
    InventoryReportExportView,
    InventoryReportView,
)

router = DefaultRouter()
router.register(r"alerts", InventoryAlertViewSet, basename="inventory-alert")
router.register(r"ledger", InventoryLedgerViewSet, basename="inventory-ledger")

urlpatterns = [
    path("reports/", InventoryReportView.as_view(), name="inventory-report"),
    path("reports/export/", InventoryReportExportView.as_view(), name="inventory-report-export"),
    path("", include(router.urls)),
]
