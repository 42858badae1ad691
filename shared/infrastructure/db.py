"""Database helpers shared by the engine services."""

from __future__ import annotations

from django.db import DEFAULT_DB_ALIAS, transaction  # type: ignore


def lock_for_update(queryset, using: str = DEFAULT_DB_ALIAS):
    """Apply select_for_update when inside transaction.atomic().

    Outside an atomic block the plain queryset comes back, since Django
    refuses to evaluate a locking query there. SQLite ignores FOR UPDATE;
    the surrounding transaction is then the only isolation.
    """

    if not transaction.get_connection(using).in_atomic_block:
        return queryset
    return queryset.select_for_update()
