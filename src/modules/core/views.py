import time
from typing import Any, Dict

import structlog
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger(__name__)


def _probe_database(alias: str = DEFAULT_DB_ALIAS) -> Dict[str, Any]:
    """Round-trip ``SELECT 1``; ``{"status": "down"}`` if the store is unreachable."""
    start = time.monotonic()
    try:
        connection = connections[alias]
        connection.ensure_connection()
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError:
        logger.error("health_check.database_down", alias=alias, exc_info=True)
        return {"status": "down"}
    return {"status": "up", "response_time_ms": round((time.monotonic() - start) * 1000, 2)}


def health_check(request: HttpRequest) -> JsonResponse:
    services = {"database": _probe_database()}
    healthy = all(service["status"] == "up" for service in services.values())
    status = "healthy" if healthy else "unhealthy"

    logger.info("health_check.completed", status=status)
    return JsonResponse(
        {"status": status, "timestamp": timezone.now().isoformat(), "services": services},
        status=200 if healthy else 503,
    )
