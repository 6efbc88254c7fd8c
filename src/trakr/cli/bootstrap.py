# src/trakr/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- builds the TaskStore from settings,
- brackets one command with load() and flush().
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from ..config import get_settings
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_store(*, settings=None) -> TaskStore:
    """
    Create a TaskStore from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return TaskStore(
        settings.db_path,
        strict_today=bool(getattr(settings, "strict_today", False)),
    )


@contextmanager
def store_session(*, settings=None) -> Iterator[TaskStore]:
    """
    Load the store, hand it to the caller, then flush it.

    Flush only happens when the body finishes normally; if a command raises,
    the in-memory changes are dropped and the file is left untouched.
    """
    store = create_store(settings=settings)
    store.load()
    yield store
    store.flush()
