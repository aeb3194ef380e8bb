"""Build and run the project with its build tool."""

import logging
import subprocess
from pathlib import Path

from relaunch.errors import BuildToolNotFound

logger = logging.getLogger(__name__)


class BuildRunner:
    """Runs ``<tool> build`` and ``<tool> run`` with a release profile flag."""

    def __init__(
        self,
        tool: str = "cargo",
        project_dir: Path | None = None,
        profile_flag: str = "--release",
    ) -> None:
        """
        Initialize the BuildRunner.

        Args:
            tool: Build tool executable, looked up on PATH.
            project_dir: Working directory for the build tool. Default: cwd.
            profile_flag: Flag selecting the optimized build profile.
        """
        self.tool = tool
        self.project_dir = project_dir or Path.cwd()
        self.profile_flag = profile_flag

    def _invoke(self, subcommand: str) -> int:
        args = [self.tool, subcommand, self.profile_flag]
        logger.info("Running %s in %s", " ".join(args), self.project_dir)
        try:
            res = subprocess.run(args, cwd=str(self.project_dir), check=False)
        except FileNotFoundError as exc:
            raise BuildToolNotFound(self.tool) from exc
        if res.returncode != 0:
            logger.error("%s exited with code %d", " ".join(args), res.returncode)
        return res.returncode

    def build(self) -> int:
        """Build the project. Return the build tool's exit code."""
        return self._invoke("build")

    def run(self) -> int:
        """Run the project. Return the build tool's exit code."""
        return self._invoke("run")

    def build_and_run(self) -> int:
        """
        Build, then run the project.

        Both steps always run; a failed build is left for run to report.

        Returns:
            Exit code of the run step.
        """
        self.build()
        return self.run()
