"""Package version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).parent.parent.parent / "pyproject.toml"


def get_version() -> str:
    """Version of the installed distribution, or of the source checkout."""
    try:
        return _metadata_version("themevars")
    except PackageNotFoundError:
        pass
    if _PYPROJECT.exists():
        data = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8"))
        return str(data.get("project", {}).get("version", "0.0.0"))
    return "0.0.0"
