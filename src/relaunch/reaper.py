"""Find leftover processes by command line and kill them."""

import logging
from collections.abc import Iterable, Sequence

from relaunch.errors import EnumerationError
from relaunch.models import ProcessRecord, ReapOutcome, ReapReport
from relaunch.process_table import ProcessTable, protected_pids

logger = logging.getLogger(__name__)


def matches(record: ProcessRecord, patterns: Sequence[str]) -> bool:
    """Check whether a command line contains every pattern."""
    if not patterns:
        return False
    return all(pattern in record.command_line for pattern in patterns)


class ProcessReaper:
    """
    Kill every process whose command line contains all of a set of patterns.

    The reaper never signals its own process or any of its ancestors, so a
    pattern that also appears in the invoking command line cannot take down
    the caller.
    """

    def __init__(
        self,
        table: ProcessTable,
        exclude: Iterable[int] | None = None,
    ) -> None:
        """
        Initialize the ProcessReaper.

        Args:
            table: Process table to read and signal.
            exclude: PIDs that must never be signaled. Defaults to this
                process and its ancestors.
        """
        self._table = table
        self._exclude = frozenset(protected_pids() if exclude is None else exclude)

    @property
    def exclude(self) -> frozenset[int]:
        """Get the PIDs the reaper will never signal."""
        return self._exclude

    def find_matching(self, patterns: Sequence[str]) -> list[int]:
        """
        Return the PIDs of processes matching every pattern.

        Duplicates and excluded PIDs are dropped; table order is kept.

        Raises:
            EnumerationError: The process table could not be read.
        """
        pids: list[int] = []
        seen: set[int] = set()
        for record in self._table.list_processes():
            if record.pid in seen or not matches(record, patterns):
                continue
            seen.add(record.pid)
            if record.pid in self._exclude:
                logger.warning(
                    "Skipping protected process %d matching %s", record.pid, list(patterns)
                )
                continue
            pids.append(record.pid)
        return pids

    def reap_matching(self, patterns: Sequence[str]) -> list[int]:
        """
        Kill every process matching all patterns and report it on stdout.

        Args:
            patterns: Substrings that must all occur in the command line.

        Returns:
            The PIDs that were signaled.

        Raises:
            EnumerationError: The process table could not be read. No
                process is signaled in that case.
        """
        if not patterns:
            logger.warning("No patterns configured, nothing will be reaped")
        pids = self.find_matching(patterns)
        if not pids:
            logger.debug("No processes matching %s", list(patterns))
            return pids

        print(f"Running processes are {pids}")
        for pid in pids:
            print(f"Killing process with PID - {pid}")
            if not self._table.signal_kill(pid):
                logger.info("Could not kill process %d, continuing", pid)
        return pids

    def run(self, patterns: Sequence[str]) -> ReapReport:
        """Reap matching processes, reporting enumeration failure as an outcome."""
        try:
            pids = self.reap_matching(patterns)
        except EnumerationError as exc:
            logger.error("%s", exc)
            return ReapReport(ReapOutcome.ENUMERATION_FAILED)
        return ReapReport(ReapOutcome.OK, pids)
