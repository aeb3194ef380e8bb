"""Process table access for relaunch."""

import logging
import os
from typing import Protocol

import psutil

from relaunch.errors import EnumerationError
from relaunch.models import ProcessRecord

logger = logging.getLogger(__name__)


class ProcessTable(Protocol):
    """Read and signal the host process table."""

    def list_processes(self) -> list[ProcessRecord]:
        """Return one record per running process."""
        ...

    def signal_kill(self, pid: int) -> bool:
        """Forcefully kill a process. Return False if it could not be signaled."""
        ...


class PsutilProcessTable:
    """
    Process table backed by psutil.

    process_iter skips processes that vanish mid-scan and reports fields it
    may not read as None, so only a failure of the scan itself is an error.
    signal_kill tolerates processes that are already gone.
    """

    # Attributes to fetch for every process
    ATTRS = ["pid", "name", "cmdline"]

    def list_processes(self) -> list[ProcessRecord]:
        """
        Collect a record for every running process.

        Raises:
            EnumerationError: The process table itself could not be read.
        """
        records: list[ProcessRecord] = []

        try:
            for proc in psutil.process_iter(attrs=self.ATTRS):
                info = proc.info

                # Kernel threads and zombies have no argv; denied fields are None
                cmdline = info.get("cmdline") or []
                command_line = " ".join(cmdline) if cmdline else info.get("name") or ""

                records.append(ProcessRecord(pid=info["pid"], command_line=command_line))
        except (psutil.Error, OSError) as exc:
            raise EnumerationError(f"cannot read process table: {exc}") from exc

        logger.debug("Enumerated %d processes", len(records))
        return records

    def signal_kill(self, pid: int) -> bool:
        """
        Send SIGKILL (TerminateProcess on Windows) to a process.

        Args:
            pid: Process to kill.

        Returns:
            True if the signal was sent, False if the process was already gone
            or permission was denied.
        """
        try:
            psutil.Process(pid).kill()
        except psutil.NoSuchProcess:
            logger.info("Process %d already exited", pid)
            return False
        except psutil.AccessDenied:
            logger.warning("Permission denied killing process %d", pid)
            return False
        return True


def protected_pids() -> frozenset[int]:
    """Return the PID of this process and of all its ancestors."""
    pids = {os.getpid(), os.getppid()}
    try:
        pids.update(parent.pid for parent in psutil.Process().parents())
    except psutil.Error as exc:
        logger.warning("Could not walk process ancestry: %s", exc)
    return frozenset(pids)
