from __future__ import annotations

import os
import sys
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path

# Ensure the local package is importable for autodoc without requiring an install step.
_DOCS_DIR = Path(__file__).resolve().parent
_ROOT = _DOCS_DIR.parent
sys.path.insert(0, str(_ROOT / "src"))

project = "toolfind"


def _normalize_display_version(raw_release: str) -> str:
    stable_release = raw_release
    for marker in ("+", ".post", ".dev"):
        stable_release = stable_release.split(marker, maxsplit=1)[0]
    return stable_release


def _resolve_metadata_release(package_name: str = "toolfind") -> str:
    try:
        return package_version(package_name)
    except PackageNotFoundError:
        return "0+unknown"


release = _resolve_metadata_release()
version = _normalize_display_version(release)

extensions: list[str] = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx_copybutton",
]

root_doc = "index"
source_suffix: dict[str, str] = {
    ".rst": "restructuredtext",
}

exclude_patterns: list[str] = ["_build"]

html_theme = "furo"
html_theme_options = {
    "source_directory": "docs",
    "source_branch": (os.environ.get("TOOLFIND_DOCS_SOURCE_BRANCH") or "main").strip(),
}

autodoc_typehints = "none"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

html_title = "toolfind: locate executables on PATH, in the environment and in the cargo home"
