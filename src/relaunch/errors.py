"""Exceptions raised by relaunch."""


class RelaunchError(Exception):
    """Base class for relaunch errors."""


class EnumerationError(RelaunchError):
    """The process table could not be read."""


class BuildToolNotFound(RelaunchError):
    """The build tool executable does not exist or is not on PATH."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"build tool not found: {tool}")
        self.tool = tool
