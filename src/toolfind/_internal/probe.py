from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Final, TypeAlias

_DEFAULT_PATHEXT: Final[str] = ".COM;.EXE;.BAT;.CMD"

ExecutableCheck: TypeAlias = Callable[[Path], bool]


class ExecutableProbe(ABC):
    """Platform strategy deciding which files count as executables.

    Pass `check` to replace the filesystem test, e.g. to run lookups against a fake tree.
    """

    path_separator: str

    def __init__(self, *, check: ExecutableCheck | None = None) -> None:
        self._check = check

    @abstractmethod
    def candidates(self, path: Path) -> Iterator[Path]:
        """Yield the concrete file names worth testing for `path`, in preference order."""

    @abstractmethod
    def _is_executable_file(self, path: Path) -> bool: ...

    def is_executable(self, path: Path) -> bool:
        if self._check is not None:
            return self._check(path)

        return self._is_executable_file(path)

    def is_directory(self, path: Path) -> bool:
        return os.path.isdir(path)

    def probe(self, path: Path) -> Path | None:
        for candidate in self.candidates(path):
            if self.is_executable(candidate):
                return candidate

        return None

    def split_search_path(self, value: str) -> list[Path]:
        return [Path(entry) for entry in value.split(self.path_separator) if entry]


class PosixProbe(ExecutableProbe):
    path_separator = ":"

    def candidates(self, path: Path) -> Iterator[Path]:
        yield path

    def _is_executable_file(self, path: Path) -> bool:
        # os.path.isfile reports unreadable or overlong paths as "not a file".
        return os.path.isfile(path) and os.access(path, os.X_OK)


class WindowsProbe(ExecutableProbe):
    """Matches executables by extension, since Windows has no execute bit for plain files."""

    path_separator = ";"

    def __init__(
        self,
        *,
        pathext: str | None = None,
        check: ExecutableCheck | None = None,
    ) -> None:
        super().__init__(check=check)
        raw = pathext or _DEFAULT_PATHEXT
        self._extensions: Final[tuple[str, ...]] = tuple(
            ext.lower() for ext in raw.split(";") if ext.startswith(".")
        )

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def candidates(self, path: Path) -> Iterator[Path]:
        if path.suffix.lower() in self._extensions:
            yield path
            return

        for ext in self._extensions:
            yield path.with_name(path.name + ext)

    def _is_executable_file(self, path: Path) -> bool:
        return path.suffix.lower() in self._extensions and os.path.isfile(path)


def default_probe(env: Mapping[str, str] | None = None) -> ExecutableProbe:
    """Select the probe strategy for the running platform."""
    if os.name == "nt":
        source = os.environ if env is None else env
        return WindowsProbe(pathext=source.get("PATHEXT"))

    return PosixProbe()
