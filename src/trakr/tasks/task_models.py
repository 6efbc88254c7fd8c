# src/trakr/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from enum import StrEnum
from typing import Any

from ..errors import StoreFormatError


_RECORD_KEYS = ("id", "start", "end", "info")


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - not persisted; derived from whether `end` is set
    - ACTIVE -> ENDED is the only transition
    """

    ACTIVE = "active"
    ENDED = "ended"


def now_local() -> datetime:
    return datetime.now().astimezone()


def format_timestamp(ts: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a trailing Z (e.g. 2024-03-01T09:15:00.000Z)."""
    return ts.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: Any) -> datetime:
    if not isinstance(raw, str) or not raw.strip():
        raise StoreFormatError(f"invalid timestamp: {raw!r}")
    s = raw.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        ts = datetime.fromisoformat(s)
    except ValueError as e:
        raise StoreFormatError(f"invalid timestamp: {raw!r}") from e
    # Naive timestamps are taken as local time.
    return ts.astimezone()


@dataclass(slots=True)
class Task:
    id: int
    start: datetime
    end: datetime | None
    info: str
    # Unknown record keys, written back unchanged on flush.
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.ACTIVE if self.end is None else TaskStatus.ENDED

    def duration(self, now: datetime | None = None) -> timedelta:
        """Absolute time between start and end (or `now` for a running task)."""
        until = self.end if self.end is not None else (now or now_local())
        return abs(until - self.start)

    def to_record(self) -> dict[str, Any]:
        return {
            **self.extra,
            "id": self.id,
            "start": format_timestamp(self.start),
            "end": None if self.end is None else format_timestamp(self.end),
            "info": self.info,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise StoreFormatError("invalid trakr.json - task entry is not an object")
        missing = [k for k in _RECORD_KEYS if k not in raw]
        if missing:
            raise StoreFormatError(f"invalid trakr.json - task entry missing {', '.join(missing)}")

        task_id = raw["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise StoreFormatError(f"invalid trakr.json - bad task id {task_id!r}")

        info = raw["info"]
        if not isinstance(info, str):
            raise StoreFormatError(f"invalid trakr.json - bad task info {info!r}")

        return cls(
            id=task_id,
            start=parse_timestamp(raw["start"]),
            end=None if raw["end"] is None else parse_timestamp(raw["end"]),
            info=info,
            extra={k: v for k, v in raw.items() if k not in _RECORD_KEYS},
        )
