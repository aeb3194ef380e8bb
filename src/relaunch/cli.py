"""relaunch - kill leftover processes, then build and run the project."""

import logging
import sys

from relaunch.build import BuildRunner
from relaunch.config import Settings
from relaunch.environment import load_environment
from relaunch.errors import BuildToolNotFound
from relaunch.process_table import ProcessTable, PsutilProcessTable
from relaunch.reaper import ProcessReaper

logger = logging.getLogger("relaunch")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Shell convention for "command not found"
EXIT_TOOL_NOT_FOUND = 127


def configure_logging(level: int) -> None:
    """Send log records to stderr so stdout only carries the kill report."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def relaunch(
    settings: Settings,
    table: ProcessTable | None = None,
    runner: BuildRunner | None = None,
) -> int:
    """
    Run the full sequence: environment load, reap, build, run.

    Args:
        settings: Runtime settings.
        table: Process table to reap from. Default: the live psutil table.
        runner: Build runner. Default: one built from settings.

    Returns:
        The exit code for the program.
    """
    load_environment(settings.env_path)

    reaper = ProcessReaper(table or PsutilProcessTable())
    report = reaper.run(settings.patterns)
    if not report.ok:
        logger.error("Process table could not be read, building without reaping")

    runner = runner or BuildRunner(settings.build_tool, settings.project_dir)
    try:
        return runner.build_and_run()
    except BuildToolNotFound as exc:
        logger.error("%s", exc)
        return EXIT_TOOL_NOT_FOUND


def main() -> None:
    """Entry point for the relaunch command."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    sys.exit(relaunch(settings))


if __name__ == "__main__":
    main()
