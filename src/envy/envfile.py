from __future__ import annotations

import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from envy.errors import EnvyError

LOGGER = logging.getLogger(__name__)


def load_env_file(path: Path | str | None = None, *, override: bool = False) -> bool:
    """Load a ``.env`` file into ``os.environ``.

    Without ``path`` the nearest ``.env`` above the working directory is used
    and a missing file is not an error. An explicit ``path`` must exist.
    Returns True when at least one variable was set.
    """
    if path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            LOGGER.debug("No .env file found")
            return False
        env_path = Path(found)
    else:
        env_path = Path(path).expanduser()
        if not env_path.is_file():
            raise EnvyError(f"Env file not found: {env_path}")
    loaded = load_dotenv(dotenv_path=env_path, override=override)
    LOGGER.info("Loaded environment from %s", env_path)
    return loaded
