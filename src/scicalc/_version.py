"""Version lookup for scicalc."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Return the version declared in a source checkout, else the installed one."""
    if _PYPROJECT.is_file():
        with open(_PYPROJECT, "rb") as f:
            project = tomllib.load(f).get("project", {})
        if project.get("name") == "scicalc" and "version" in project:
            return str(project["version"])
    try:
        return _metadata_version("scicalc")
    except PackageNotFoundError:
        return "0.0.0"
