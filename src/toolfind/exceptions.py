from __future__ import annotations

from toolfind.types.locator_options import SearchSource


class ToolfindError(Exception):
    """Base exception for all errors raised by toolfind."""


class InvalidExecutableNameError(ToolfindError, ValueError):
    """Raised when a candidate name is empty or contains a directory component."""

    def __init__(self, message: str, *, executable_name: str) -> None:
        super().__init__(message)
        self.executable_name = executable_name


class ExecutableNotFoundError(ToolfindError):
    """Raised by `require()` when no search source yields the executable."""

    def __init__(
        self,
        message: str,
        *,
        executable_name: str,
        searched: tuple[SearchSource, ...] = (),
    ) -> None:
        super().__init__(message)
        self.executable_name = executable_name
        self.searched = searched
