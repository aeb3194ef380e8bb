"""Shared test fixtures for relaunch."""

import pytest

from relaunch.errors import EnumerationError
from relaunch.models import ProcessRecord


class FakeProcessTable:
    """In-memory process table that records every kill."""

    def __init__(
        self,
        records: list[tuple[int, str]] | None = None,
        gone: set[int] | None = None,
        fail_enumeration: bool = False,
    ) -> None:
        self.records = [ProcessRecord(pid, cmd) for pid, cmd in records or []]
        self.gone = gone or set()
        self.fail_enumeration = fail_enumeration
        self.killed: list[int] = []

    def list_processes(self) -> list[ProcessRecord]:
        if self.fail_enumeration:
            raise EnumerationError("cannot read process table: boom")
        return list(self.records)

    def signal_kill(self, pid: int) -> bool:
        self.killed.append(pid)
        return pid not in self.gone


@pytest.fixture
def fake_table():
    """Factory for FakeProcessTable instances."""
    return FakeProcessTable
