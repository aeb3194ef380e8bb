"""Data models for relaunch."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(slots=True, frozen=True)
class ProcessRecord:
    """Immutable view of one process table entry."""

    pid: int
    command_line: str  # argv joined by spaces, or the process name


class ReapOutcome(Enum):
    """Outcome of a reaper pass."""

    OK = "ok"
    ENUMERATION_FAILED = "enumeration_failed"


@dataclass(slots=True)
class ReapReport:
    """Result of a reaper pass: the outcome and the PIDs that were signaled."""

    outcome: ReapOutcome
    pids: list[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Whether the process table could be read."""
        return self.outcome is ReapOutcome.OK
