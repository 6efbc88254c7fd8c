# src/trakr/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path

from ..errors import StoreAccessError, StoreFormatError, TaskAlreadyEndedError, TaskOutOfBoundsError
from .task_models import Task, now_local

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store.

    The whole list lives in memory for one process run:
    - load() reads the file once (a missing file means "no tasks yet")
    - task operations only touch the in-memory list
    - flush() overwrites the file with the full list

    Task ids are list positions. Entries are appended and never removed or
    reordered, so `self._tasks[task_id]` is always the task with that id.

    No locking: two concurrent invocations race on read-modify-write.
    """

    def __init__(self, path: str | Path, *, strict_today: bool = False) -> None:
        self._path = Path(path).expanduser()
        self._strict_today = strict_today
        self._tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self._path

    # ---- persistence ----

    def load(self) -> None:
        if not self._path.exists():
            logger.debug("No store file at %s; starting empty", self._path)
            self._tasks = []
            return

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except OSError as e:
            raise StoreAccessError(f"could not read {self._path} - {e.strerror or e}") from e
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StoreFormatError(f"invalid trakr.json - {e}") from e

        if not isinstance(data, list):
            raise StoreFormatError("invalid trakr.json - not an array")

        self._tasks = [Task.from_record(raw) for raw in data]
        logger.debug("Loaded %d tasks from %s", len(self._tasks), self._path)

    def flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([t.to_record() for t in self._tasks], ensure_ascii=False)

        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(payload, "utf-8")
        os.replace(tmp, self._path)
        logger.debug("Flushed %d tasks to %s", len(self._tasks), self._path)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def all_tasks(self) -> list[Task]:
        return list(self._tasks)

    def get_task(self, task_id: int | None) -> Task:
        if task_id is None or task_id < 0 or task_id >= len(self._tasks):
            raise TaskOutOfBoundsError(task_id)
        return self._tasks[task_id]

    def start(self, info: str, timestamp: datetime | None = None) -> Task:
        task = Task(
            id=len(self._tasks),
            start=timestamp or now_local(),
            end=None,
            info=info,
        )
        self._tasks.append(task)
        logger.info("Started task id=%d info=%r", task.id, task.info)
        return task

    def end(self, task_id: int | None, timestamp: datetime | None = None) -> Task:
        """
        Close the task at `task_id`.

        `task_id` may be None (an id that failed to parse); it is then simply
        out of bounds.
        """
        task = self.get_task(task_id)
        if task.end is not None:
            raise TaskAlreadyEndedError(task.id)

        task.end = timestamp or now_local()
        logger.info("Ended task id=%d after %s", task.id, task.duration())
        return task

    def get_active(self) -> list[Task]:
        return [t for t in self._tasks if t.end is None]

    def get_done_today(self, now: datetime | None = None) -> list[Task]:
        """
        Tasks ended "today", in insertion order.

        By default only the local day-of-month is compared, so a task ended on
        the 5th of last month also counts on the 5th. With strict_today the
        full local calendar date must match.
        """
        today = (now or now_local()).astimezone()
        out: list[Task] = []
        for t in self._tasks:
            if t.end is None:
                continue
            end = t.end.astimezone()
            if self._strict_today:
                if end.date() == today.date():
                    out.append(t)
            elif end.day == today.day:
                out.append(t)
        return out
