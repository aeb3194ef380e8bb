"""Settings for relaunch, read from environment variables."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PATTERNS = ("dev2", "rust_test")
DEFAULT_ENV_FILE = "configuration/env.sh"
DEFAULT_BUILD_TOOL = "cargo"
DEFAULT_LOG_LEVEL = "INFO"


def parse_patterns(raw: str) -> tuple[str, ...]:
    """Split a comma-separated pattern list, dropping blank entries."""
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def parse_log_level(raw: str) -> int:
    """Map a logging level name to its value, falling back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime settings."""

    patterns: tuple[str, ...] = DEFAULT_PATTERNS
    project_dir: Path = field(default_factory=Path.cwd)
    env_file: Path = Path(DEFAULT_ENV_FILE)  # relative to project_dir
    build_tool: str = DEFAULT_BUILD_TOOL
    log_level: int = logging.INFO

    @property
    def env_path(self) -> Path:
        """Absolute path of the environment file."""
        return self.project_dir / self.env_file

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from RELAUNCH_* variables.

        Args:
            environ: Variables to read. Defaults to os.environ.
        """
        env = os.environ if environ is None else environ
        project_dir = env.get("RELAUNCH_PROJECT_DIR")
        return cls(
            patterns=parse_patterns(env.get("RELAUNCH_PATTERNS", ",".join(DEFAULT_PATTERNS))),
            project_dir=Path(project_dir) if project_dir else Path.cwd(),
            env_file=Path(env.get("RELAUNCH_ENV_FILE", DEFAULT_ENV_FILE)),
            build_tool=env.get("RELAUNCH_BUILD_TOOL", DEFAULT_BUILD_TOOL),
            log_level=parse_log_level(env.get("RELAUNCH_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        )
