from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Literal, TypeAlias, TypedDict

if TYPE_CHECKING:
    from typing_extensions import NotRequired

    from toolfind._internal.probe import ExecutableProbe

SearchSource: TypeAlias = Literal["path", "env", "cargo_home"]


class LocatorOptions(TypedDict):
    """Configuration accepted by `Locator`.

    Every key is optional. Omitted keys fall back to the live process environment and the
    probe strategy of the running platform.
    """

    env: NotRequired[Mapping[str, str]]
    probe: NotRequired[ExecutableProbe]
    home: NotRequired[str]
    cargo_home: NotRequired[str]
