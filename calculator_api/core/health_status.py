"""Health Status — liveness payload computed from an explicit process start instant."""

import time
from datetime import datetime, timezone
from typing import Callable

HEALTH_MESSAGE = "Service is healthy"


def build_health_status(
    started_at: float,
    now: datetime | None = None,
    clock: Callable[[], float] = time.monotonic,
) -> dict:
    """Build the health payload. started_at must come from the same clock."""
    now = now or datetime.now(timezone.utc)
    return {
        "status": "OK",
        "message": HEALTH_MESSAGE,
        "timestamp": now.isoformat(),
        "uptime": max(0.0, clock() - started_at),
    }
