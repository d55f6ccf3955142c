from toolfind._internal.probe import ExecutableProbe, PosixProbe, WindowsProbe, default_probe
from toolfind.exceptions import (
    ExecutableNotFoundError,
    InvalidExecutableNameError,
    ToolfindError,
)
from toolfind.home import cargo_home, home_dir
from toolfind.locator import (
    Locator,
    find,
    find_in_cargo_home,
    find_in_env,
    find_in_path,
    find_with_cargo_home,
    probe_for_binary,
    require,
)
from toolfind.types.locator_options import LocatorOptions, SearchSource

__all__ = [
    "ExecutableNotFoundError",
    "ExecutableProbe",
    "InvalidExecutableNameError",
    "Locator",
    "LocatorOptions",
    "PosixProbe",
    "SearchSource",
    "ToolfindError",
    "WindowsProbe",
    "cargo_home",
    "default_probe",
    "find",
    "find_in_cargo_home",
    "find_in_env",
    "find_in_path",
    "find_with_cargo_home",
    "home_dir",
    "probe_for_binary",
    "require",
]
