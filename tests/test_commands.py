# tests/test_commands.py

from __future__ import annotations

import pytest

from trakr.cli.commands import CommandRegistry, parse_task_id, registry
from trakr.errors import TaskOutOfBoundsError, UsageError
from trakr.tasks.task_store import TaskStore


def test_command_registry_routes_to_handler(store: TaskStore) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def h(store, args):
        called.append(args)
        return "ok"

    reg.register("a", h, "a")

    assert reg.handle(store, ["a", "x", "y"]) == "ok"
    assert called == [["x", "y"]]


def test_command_registry_rejects_missing_and_unknown(store: TaskStore) -> None:
    reg = CommandRegistry()
    with pytest.raises(UsageError, match="not enough arguments"):
        reg.resolve([])
    with pytest.raises(UsageError, match="unsupported command"):
        reg.handle(store, ["nope"])


def test_help_lists_all_commands() -> None:
    text = registry.build_help()
    assert text.startswith("USAGE: trakr <command> [options]")
    for name in ("start", "end", "ls", "help"):
        assert f"\t{name}" in text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("0", 0), (" 12 ", 12), ("3abc", 3), ("-1", -1), ("abc", None), ("", None)],
)
def test_parse_task_id(raw: str, expected: int | None) -> None:
    assert parse_task_id(raw) == expected


def test_start_strips_info(store: TaskStore) -> None:
    registry.handle(store, ["start", "  write docs  "])
    assert store.get_task(0).info == "write docs"


def test_start_and_end_require_argument(store: TaskStore) -> None:
    with pytest.raises(UsageError, match="missing info for start"):
        registry.handle(store, ["start"])
    with pytest.raises(UsageError, match="missing id for end"):
        registry.handle(store, ["end"])


def test_end_with_garbage_id_is_out_of_bounds(store: TaskStore) -> None:
    registry.handle(store, ["start", "a"])
    with pytest.raises(TaskOutOfBoundsError):
        registry.handle(store, ["end", "abc"])
    assert store.get_task(0).end is None


def test_ls_renders_both_sections(store: TaskStore) -> None:
    out = registry.handle(store, ["ls"])
    assert out == "No active tasks.\n\nNo completed tasks today."

    registry.handle(store, ["start", "a"])
    registry.handle(store, ["start", "b"])
    registry.handle(store, ["end", "0"])
    out = registry.handle(store, ["ls"]) or ""
    assert "Active tasks:" in out
    assert "\tb" in out
    assert "Completed tasks:" in out
    assert "\ta" in out


def test_command_names_are_case_sensitive(store: TaskStore) -> None:
    with pytest.raises(UsageError, match="unsupported command"):
        registry.handle(store, ["LS"])
