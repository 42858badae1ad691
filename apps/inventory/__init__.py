"""Inventory app package.

Housekeeping supplies: item reference data, per-room provisioning, the
shared warehouse pool, the append-only stock ledger and stock alerts.
The warehouse deduction engine consumes a room's supplies from the pool
when a booking starts occupying it.
"""
