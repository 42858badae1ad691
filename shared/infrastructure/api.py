"""DRF glue for engine errors."""

from __future__ import annotations

import logging

from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import EngineError

logger = logging.getLogger(__name__)


def engine_exception_handler(exc, context):
    """Render EngineError subclasses as ``{"detail", "code"}`` with their status."""
    if isinstance(exc, EngineError):
        if exc.status_code >= 500:
            view = context.get("view")
            logger.error(f"{exc.code} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}")
        return Response({"detail": exc.message, "code": exc.code}, status=exc.status_code)
    return exception_handler(exc, context)


def request_actor(request):
    """Authenticated user for audit fields, or None."""
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        return user
    return None
