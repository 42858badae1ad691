"""The stock ledger is append-only."""

from __future__ import annotations

import pytest

from apps.inventory.exceptions import LedgerImmutableError
from apps.inventory.models import InventoryLedgerEntry

pytestmark = pytest.mark.django_db


@pytest.fixture
def entry(make_item):
    item = make_item()
    return InventoryLedgerEntry.objects.create(
        item=item,
        delta=-2,
        resulting_level=3,
        reason="Check-in",
        booking_id="BK-1",
        note="2 pcs of Bath towel consumed by room Deluxe 101",
    )


def test_entries_cannot_be_edited(entry):
    entry.delta = -5
    with pytest.raises(LedgerImmutableError):
        entry.save()

    entry.refresh_from_db()
    assert entry.delta == -2


def test_entries_cannot_be_deleted(entry):
    with pytest.raises(LedgerImmutableError):
        entry.delete()
    with pytest.raises(LedgerImmutableError):
        InventoryLedgerEntry.objects.filter(pk=entry.pk).delete()

    assert InventoryLedgerEntry.objects.filter(pk=entry.pk).exists()


def test_bulk_update_is_refused(entry):
    with pytest.raises(LedgerImmutableError):
        InventoryLedgerEntry.objects.filter(pk=entry.pk).update(delta=0)
