from __future__ import annotations

import os
from pathlib import Path

import pytest

from toolfind.home import cargo_home, home_dir

_HOME_VARIABLE = "USERPROFILE" if os.name == "nt" else "HOME"


def test_home_dir_reads_mapping() -> None:
    assert home_dir({_HOME_VARIABLE: "/home/ferris"}) == Path("/home/ferris")


def test_home_dir_without_variables_in_mapping_is_none() -> None:
    assert home_dir({}) is None
    assert home_dir({_HOME_VARIABLE: ""}) is None


def test_home_dir_defaults_to_live_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv(_HOME_VARIABLE, str(tmp_path))

    assert home_dir() == tmp_path


def test_cargo_home_prefers_cargo_home_variable() -> None:
    env = {"CARGO_HOME": "/opt/cargo", _HOME_VARIABLE: "/home/ferris"}

    assert cargo_home(env) == Path("/opt/cargo")


def test_cargo_home_falls_back_to_dot_cargo() -> None:
    assert cargo_home({_HOME_VARIABLE: "/home/ferris"}) == Path("/home/ferris") / ".cargo"


def test_cargo_home_uses_explicit_home() -> None:
    assert cargo_home({}, home=Path("/srv/user")) == Path("/srv/user") / ".cargo"


def test_cargo_home_is_none_without_any_home() -> None:
    assert cargo_home({}) is None
