from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

logger = logging.getLogger(__name__)

CARGO_HOME_ENV: Final[str] = "CARGO_HOME"
_CARGO_HOME_DIRNAME: Final[str] = ".cargo"


def _home_variables() -> tuple[str, ...]:
    if os.name == "nt":
        return ("USERPROFILE", "HOME")
    return ("HOME",)


def home_dir(env: Mapping[str, str] | None = None) -> Path | None:
    """Resolve the current user's home directory.

    Args:
        env: Environment to read ``HOME`` (``USERPROFILE`` on Windows) from. Defaults to the
            live process environment.

    Returns:
        The home directory, or ``None`` when it cannot be determined. Only the live
        environment falls back to the password database via ``Path.home()``.

    """
    source = os.environ if env is None else env
    for variable in _home_variables():
        value = source.get(variable)
        if value:
            return Path(value)

    if env is not None:
        return None

    try:
        return Path.home()
    except RuntimeError:
        logger.debug("Home directory could not be determined")
        return None


def cargo_home(env: Mapping[str, str] | None = None, home: Path | None = None) -> Path | None:
    """Resolve the cargo home: ``$CARGO_HOME``, else ``<home>/.cargo``.

    ``home`` overrides home directory resolution from ``env``.
    """
    source = os.environ if env is None else env
    explicit = source.get(CARGO_HOME_ENV)
    if explicit:
        return Path(explicit)

    base = home if home is not None else home_dir(env)
    if base is None:
        return None

    return base / _CARGO_HOME_DIRNAME
