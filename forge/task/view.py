from dataclasses import fields
from datetime import datetime, timezone
from typing import Any

from forge.core.models import Task

TIMESTAMP_FIELDS = ("created_at", "updated_at", "completed_at")


def to_datetime(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def to_public(task: Task) -> dict[str, Any]:
    """Task fields for display, with millisecond timestamps as UTC datetimes."""
    public = {f.name: getattr(task, f.name) for f in fields(task)}
    for name in TIMESTAMP_FIELDS:
        if public[name] is not None:
            public[name] = to_datetime(public[name])
    return public
