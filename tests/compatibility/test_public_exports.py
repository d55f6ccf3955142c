from __future__ import annotations

import toolfind
import toolfind.locator
from toolfind import __all__ as toolfind_all


def test_exports_are_sorted_and_unique() -> None:
    assert list(toolfind_all) == sorted(set(toolfind_all))


def test_every_export_resolves() -> None:
    missing = [name for name in toolfind_all if not hasattr(toolfind, name)]

    assert missing == []


def test_lookup_functions_are_exported() -> None:
    assert {
        "find",
        "find_in_cargo_home",
        "find_in_env",
        "find_in_path",
        "find_with_cargo_home",
        "probe_for_binary",
    } <= set(toolfind_all)


def test_public_lookups_are_documented() -> None:
    undocumented = [
        f"{owner.__name__}.{name}"
        for owner in (toolfind.locator, toolfind.Locator)
        for name in (
            "find",
            "find_in_cargo_home",
            "find_in_env",
            "find_in_path",
            "find_with_cargo_home",
            "probe_for_binary",
            "require",
        )
        if not getattr(owner, name).__doc__
    ]

    assert undocumented == []
