from __future__ import annotations

import os
import string
from typing import Final

from toolfind.exceptions import InvalidExecutableNameError

_SEPARATORS: Final[frozenset[str]] = frozenset(
    sep for sep in ("/", "\\", os.sep, os.altsep) if sep
)
_ENV_NAME_TABLE: Final[dict[int, int | str]] = {
    **str.maketrans(string.ascii_lowercase, string.ascii_uppercase),
    ord("-"): "_",
    ord("."): "_",
}


def validate_executable_name(name: str) -> str:
    """Return `name` unchanged, or raise if it cannot name an executable on a search path."""
    if not isinstance(name, str) or not name:
        raise InvalidExecutableNameError(
            f"Executable name must be a non-empty string, got {name!r}.",
            executable_name=str(name),
        )

    if any(sep in name for sep in _SEPARATORS):
        raise InvalidExecutableNameError(
            f'Executable name "{name}" must not contain a directory component.',
            executable_name=name,
        )

    return name


def env_var_name(name: str) -> str:
    # ASCII-only uppercasing: "rust-analyzer" -> "RUST_ANALYZER"
    return name.translate(_ENV_NAME_TABLE)
