"""Load the project environment file into the process environment."""

import logging
import os
from pathlib import Path

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


def load_environment(path: Path) -> dict[str, str]:
    """
    Load KEY=value pairs from an environment file into os.environ.

    Accepts the ``export KEY=value`` lines of a shell env script. Values
    override the current environment, the same as sourcing the file would.

    Args:
        path: Environment file to read.

    Returns:
        The variables that were set.
    """
    if not path.is_file():
        logger.warning("Environment file %s not found, continuing without it", path)
        return {}

    loaded = {key: value for key, value in dotenv_values(path).items() if value is not None}
    os.environ.update(loaded)
    logger.info("Loaded %d variables from %s", len(loaded), path)
    return loaded
