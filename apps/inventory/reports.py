"""
Inventory consumption reports built from the stock ledger, with CSV export.
"""

from __future__ import annotations

import csv
from datetime import datetime, timedelta
from decimal import Decimal
from io import StringIO
from typing import Any, Dict, List, Optional

from django.conf import settings  # type: ignore
from django.db import DEFAULT_DB_ALIAS  # type: ignore
from django.db.models import Count, DecimalField, F, Sum  # type: ignore
from django.utils import timezone  # type: ignore

from .exceptions import InventoryReportError
from .models import InventoryItem, InventoryLedgerEntry, WarehouseStock

REPORT_FIELDS = [
    "item_id",
    "name",
    "category",
    "unit",
    "unit_cost",
    "total_used",
    "total_cost",
]


def resolve_report_days(days=None) -> int:
    """Validate the ``days`` window against ``HOTEL_ENGINE`` limits."""
    engine_settings = getattr(settings, "HOTEL_ENGINE", {})
    if days in (None, ""):
        return int(engine_settings.get("DEFAULT_REPORT_DAYS", 30))

    try:
        days = int(days)
    except (TypeError, ValueError):
        raise InventoryReportError(f"days must be an integer, got {days!r}")

    max_days = int(engine_settings.get("MAX_REPORT_DAYS", 365))
    if not 1 <= days <= max_days:
        raise InventoryReportError(f"days must be between 1 and {max_days}")
    return days


def build_consumption_report(days=None, *, using: str = DEFAULT_DB_ALIAS, now=None) -> Dict[str, Any]:
    days = resolve_report_days(days)
    now = now or timezone.now()
    since = now - timedelta(days=days)

    window = InventoryLedgerEntry.objects.using(using).filter(created_at__gte=since)

    stock_value = WarehouseStock.objects.using(using).aggregate(
        total=Sum(
            F("quantity") * F("item__unit_cost"),
            output_field=DecimalField(max_digits=14, decimal_places=2),
        )
    )["total"] or Decimal("0.00")

    most_used = []
    consumption = (
        window.filter(delta__lt=0)
        .values("item_id", "item__name", "item__category", "item__unit", "item__unit_cost")
        .annotate(delta_sum=Sum("delta"))
        .order_by("delta_sum", "item__name")
    )
    for row in consumption:
        total_used = -row["delta_sum"]
        unit_cost = row["item__unit_cost"] or Decimal("0.00")
        most_used.append({
            "item_id": row["item_id"],
            "name": row["item__name"],
            "category": row["item__category"],
            "unit": row["item__unit"],
            "unit_cost": unit_cost,
            "total_used": total_used,
            "total_cost": unit_cost * total_used,
        })

    category_breakdown = [
        {"category": row["item__category"] or "uncategorized", "transaction_count": row["transaction_count"]}
        for row in window.values("item__category")
        .annotate(transaction_count=Count("id"))
        .order_by("-transaction_count", "item__category")
    ]

    recent_activity = [
        {
            "item": entry.item.name,
            "delta": entry.delta,
            "resulting_level": entry.resulting_level,
            "reason": entry.reason,
            "booking_id": entry.booking_id,
            "created_at": entry.created_at,
        }
        for entry in window.select_related("item")[:10]
    ]

    return {
        "days": days,
        "since": since,
        "summary": {
            "total_items": InventoryItem.objects.using(using).count(),
            "total_value": stock_value,
            "total_transactions": window.count(),
            "low_stock_items": WarehouseStock.objects.using(using)
            .filter(quantity__lte=F("item__low_stock_threshold"))
            .count(),
        },
        "most_used_items": most_used,
        "category_breakdown": category_breakdown,
        "recent_activity": recent_activity,
    }


def export_to_csv(rows: List[Dict[str, Any]], fieldnames: Optional[List[str]] = None) -> str:
    """
    Export a list of dictionaries to CSV format.

    Args:
        rows: List of dictionaries to export
        fieldnames: Optional list of field names (if not provided, uses keys from first row)

    Returns:
        CSV string (header only when ``rows`` is empty and fieldnames are given)
    """
    if not rows and fieldnames is None:
        return ""

    output = StringIO()
    if fieldnames is None:
        fieldnames = list(rows[0].keys())

    writer = csv.DictWriter(output, fieldnames=fieldnames, extrasaction='ignore')
    writer.writeheader()

    for row in rows:
        csv_row = {}
        for key, value in row.items():
            if isinstance(value, Decimal):
                csv_row[key] = str(value)
            elif isinstance(value, datetime):
                csv_row[key] = value.isoformat()
            elif value is None:
                csv_row[key] = ""
            else:
                csv_row[key] = value
        writer.writerow(csv_row)

    return output.getvalue()


def export_consumption_csv(days=None, *, using: str = DEFAULT_DB_ALIAS) -> str:
    report = build_consumption_report(days, using=using)
    return export_to_csv(report["most_used_items"], fieldnames=REPORT_FIELDS)
