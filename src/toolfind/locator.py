from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Final

from toolfind._internal.env_name import env_var_name, validate_executable_name
from toolfind._internal.probe import ExecutableProbe, default_probe
from toolfind.exceptions import ExecutableNotFoundError
from toolfind.home import cargo_home as resolve_cargo_home
from toolfind.types.locator_options import LocatorOptions, SearchSource

if TYPE_CHECKING:
    from typing_extensions import Unpack


logger = logging.getLogger(__name__)

_PATH_ENV: Final[str] = "PATH"
_CARGO_BIN_DIRNAME: Final[str] = "bin"


class Locator:
    """Locator resolves executables from PATH, name-derived variables and the cargo home.

    Lookup order is fixed: ``find()`` checks PATH, then the variable named after the
    executable (``cargo`` -> ``$CARGO``). ``find_with_cargo_home()`` additionally checks
    ``<cargo home>/bin`` last. A miss is reported as ``None``.
    """

    def __init__(self, **options: Unpack[LocatorOptions]) -> None:
        self._options = options
        self._env: Final[Mapping[str, str]] = options.get("env", os.environ)
        probe = options.get("probe")
        self._probe: Final[ExecutableProbe] = (
            probe if probe is not None else default_probe(self._env)
        )

    def find(self, name: str) -> Path | None:
        """Find ``name`` on PATH, falling back to its environment variable."""
        return self._first_match(name, ("path", "env"))

    def find_with_cargo_home(self, name: str) -> Path | None:
        """Find ``name`` on PATH, then its environment variable, then ``<cargo home>/bin``."""
        return self._first_match(name, ("path", "env", "cargo_home"))

    def find_in_path(self, name: str) -> Path | None:
        """Return the first ``<entry>/name`` executable, walking PATH entries in order."""
        return self._find_in_path(validate_executable_name(name))

    def find_in_env(self, name: str) -> Path | None:
        """Return the executable named by ``$NAME``, or found inside the directory it names."""
        return self._find_in_env(validate_executable_name(name))

    def find_in_cargo_home(self, name: str) -> Path | None:
        """Return ``<cargo home>/bin/name`` if it is an executable."""
        return self._find_in_cargo_home(validate_executable_name(name))

    def probe_for_binary(self, path: str | os.PathLike[str]) -> Path | None:
        """Return ``path`` (or its executable-extension variant) if it is an executable file."""
        return self._probe.probe(Path(path))

    def require(self, name: str, *, cargo_home: bool = False) -> Path:
        """Like ``find()``, but raise when nothing matches.

        Args:
            name: Executable base name, without platform extension.
            cargo_home: Also search ``<cargo home>/bin`` after PATH and the environment.

        Returns:
            The discovered executable path.

        Raises:
            ExecutableNotFoundError: If no search source yields the executable.

        """
        sources: tuple[SearchSource, ...] = (
            ("path", "env", "cargo_home") if cargo_home else ("path", "env")
        )
        found = self._first_match(name, sources)
        if found is None:
            variable = env_var_name(name)
            raise ExecutableNotFoundError(
                f'Could not locate "{name}" on PATH or via ${variable}.'
                + (" The cargo home bin directory was searched too." if cargo_home else ""),
                executable_name=name,
                searched=sources,
            )

        logger.info("Resolved %s to %s", name, found)
        return found

    def _first_match(self, name: str, sources: tuple[SearchSource, ...]) -> Path | None:
        validate_executable_name(name)

        lookups: dict[SearchSource, Callable[[str], Path | None]] = {
            "path": self._find_in_path,
            "env": self._find_in_env,
            "cargo_home": self._find_in_cargo_home,
        }
        for source in sources:
            found = lookups[source](name)
            if found is not None:
                return found

        logger.debug("%s not found in %s", name, ", ".join(sources))
        return None

    def _find_in_path(self, name: str) -> Path | None:
        raw = self._env.get(_PATH_ENV)
        if not raw:
            logger.debug("PATH is unset or empty; skipping PATH lookup for %s", name)
            return None

        for directory in self._probe.split_search_path(raw):
            found = self._probe.probe(directory / name)
            if found is not None:
                logger.debug("Found %s on PATH: %s", name, found)
                return found

        return None

    def _find_in_env(self, name: str) -> Path | None:
        variable = env_var_name(name)
        value = self._env.get(variable)
        if not value:
            return None

        # A directory value is searched for the executable, never given an extension itself.
        path = Path(value)
        found = self._probe.probe(path / name)
        if found is None and not self._probe.is_directory(path):
            found = self._probe.probe(path)

        if found is None:
            logger.debug("Ignoring $%s=%r: not an executable", variable, value)
            return None

        logger.debug("Found %s via $%s: %s", name, variable, found)
        return found

    def _find_in_cargo_home(self, name: str) -> Path | None:
        root = self._cargo_home()
        if root is None:
            logger.debug("Cargo home could not be determined; skipping lookup for %s", name)
            return None

        found = self._probe.probe(root / _CARGO_BIN_DIRNAME / name)
        if found is not None:
            logger.debug("Found %s in cargo home: %s", name, found)
        return found

    def _cargo_home(self) -> Path | None:
        explicit = self._options.get("cargo_home")
        if explicit:
            return Path(explicit)

        home = self._options.get("home")
        env = self._env if "env" in self._options else None
        return resolve_cargo_home(env, home=Path(home) if home else None)


def find(name: str) -> Path | None:
    """Return the path of ``name`` found on PATH, else via its environment variable.

    Returns:
        The executable path, or ``None`` if no source yields it.

    """
    return Locator().find(name)


def find_with_cargo_home(name: str) -> Path | None:
    """Return the path of ``name`` from PATH, its environment variable, or the cargo home.

    The cargo home is ``$CARGO_HOME`` and defaults to ``~/.cargo``; its ``bin`` directory is
    searched last.
    """
    return Locator().find_with_cargo_home(name)


def find_in_path(name: str) -> Path | None:
    """Return ``name`` from the first PATH entry that holds it as an executable."""
    return Locator().find_in_path(name)


def find_in_env(name: str) -> Path | None:
    """Return the executable named by ``$NAME`` (uppercased, ``-`` -> ``_``), if usable."""
    return Locator().find_in_env(name)


def find_in_cargo_home(name: str) -> Path | None:
    """Return ``name`` from ``$CARGO_HOME/bin`` (default ``~/.cargo/bin``), if present."""
    return Locator().find_in_cargo_home(name)


def probe_for_binary(path: str | os.PathLike[str]) -> Path | None:
    """Return ``path`` (or its executable-extension variant) if it is an executable file."""
    return Locator().probe_for_binary(path)


def require(name: str, *, cargo_home: bool = False) -> Path:
    """Resolve ``name`` like ``find()``, raising ``ExecutableNotFoundError`` on a miss."""
    return Locator().require(name, cargo_home=cargo_home)
