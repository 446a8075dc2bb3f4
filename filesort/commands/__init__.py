import logging
import sys

from filesort.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure stderr logging: -v forces DEBUG, otherwise config/env level."""
    level = logging.DEBUG if verbose else getattr(logging, get_log_level(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def get_version() -> str:
    # Prefer pyproject.toml so editable installs always reflect the latest version
    try:
        from pathlib import Path
        from filesort.config import tomllib
        pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except Exception:
        pass
    try:
        from importlib.metadata import version
        return version("filesort")
    except Exception:
        return "unknown"
