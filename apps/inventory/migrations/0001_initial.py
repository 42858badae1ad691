from decimal import Decimal

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("rooms", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="InventoryItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, unique=True)),
                ("category", models.CharField(blank=True, max_length=100)),
                ("unit", models.CharField(default="pcs", help_text="Unit of measure.", max_length=20)),
                ("unit_cost", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("low_stock_threshold", models.PositiveIntegerField(default=10)),
                ("reorder_quantity", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Inventory item",
                "verbose_name_plural": "Inventory items",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="RoomInventoryAssignment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("current_quantity", models.PositiveIntegerField(default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="room_assignments",
                        to="inventory.inventoryitem",
                    ),
                ),
                (
                    "room",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="inventory_assignments",
                        to="rooms.room",
                    ),
                ),
            ],
            options={
                "verbose_name": "Room inventory",
                "verbose_name_plural": "Room inventory",
                "constraints": [
                    models.UniqueConstraint(fields=("room", "item"), name="room_inventory_unique_item"),
                ],
            },
        ),
        migrations.CreateModel(
            name="WarehouseStock",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("quantity", models.IntegerField(default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "item",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="warehouse_stock",
                        to="inventory.inventoryitem",
                    ),
                ),
            ],
            options={
                "verbose_name": "Warehouse stock",
                "verbose_name_plural": "Warehouse stock",
                "constraints": [
                    models.CheckConstraint(condition=models.Q(quantity__gte=0), name="warehouse_stock_non_negative"),
                ],
            },
        ),
        migrations.CreateModel(
            name="InventoryLedgerEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("delta", models.IntegerField()),
                ("resulting_level", models.IntegerField()),
                ("reason", models.CharField(max_length=255)),
                ("booking_id", models.CharField(blank=True, db_index=True, max_length=64)),
                ("note", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "actor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="inventory_ledger_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="ledger_entries",
                        to="inventory.inventoryitem",
                    ),
                ),
            ],
            options={
                "verbose_name": "Inventory ledger entry",
                "verbose_name_plural": "Inventory ledger",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["item", "created_at"], name="inventory_ledger_item_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="InventoryAlert",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "alert_type",
                    models.CharField(
                        choices=[("low_stock", "Low stock"), ("out_of_stock", "Out of stock")],
                        max_length=20,
                    ),
                ),
                (
                    "severity",
                    models.CharField(
                        choices=[("warning", "Warning"), ("critical", "Critical")],
                        max_length=20,
                    ),
                ),
                ("message", models.CharField(max_length=255)),
                ("is_resolved", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="alerts",
                        to="inventory.inventoryitem",
                    ),
                ),
            ],
            options={
                "verbose_name": "Inventory alert",
                "verbose_name_plural": "Inventory alerts",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["is_resolved", "severity"], name="inventory_alert_open_idx"),
                ],
            },
        ),
    ]
