# src/trakr/errors.py

"""
Error types.

Everything raised on purpose derives from TrakrError. The CLI entrypoint is the
only place that turns these into messages and exit codes.
"""

from __future__ import annotations


class TrakrError(Exception):
    """Base class for all expected failures of one invocation."""

    exit_code = 1


class UsageError(TrakrError):
    """Missing or unsupported command/argument. Reported together with usage text."""


class TaskError(TrakrError):
    """A task operation violated the task lifecycle."""


class TaskOutOfBoundsError(TaskError):
    def __init__(self, task_id: int | None) -> None:
        super().__init__("could not end task - id out of bounds")
        self.task_id = task_id


class TaskAlreadyEndedError(TaskError):
    def __init__(self, task_id: int) -> None:
        super().__init__("could not end task - already ended")
        self.task_id = task_id


class StoreFormatError(TrakrError):
    """The persisted store file could not be understood."""


class StoreAccessError(TrakrError):
    """The store file exists but could not be read (permissions, I/O)."""
