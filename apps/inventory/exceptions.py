"""Errors raised by the inventory engine."""

from __future__ import annotations

from shared.domain.exceptions import ConflictError, DomainValidationError


class LedgerImmutableError(ConflictError):
    """Inventory ledger entries are append-only"""
    code = "ledger_immutable"


class InventoryReportError(DomainValidationError):
    """Invalid inventory report request"""
    code = "invalid_report"
