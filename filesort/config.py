"""Load ~/.filesort.config (TOML) with env-var overrides."""
from __future__ import annotations
import logging
import os
try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Python < 3.11 backport
from pathlib import Path
from typing import Any

from filesort.report import ORDERS

logger = logging.getLogger("filesort.config")

_DEFAULT: dict[str, Any] = {
    "display": {
        "icon": "\U0001f4c1",
        "order": "category",
    },
    "log": {
        "level": "WARNING",
    },
}


class ConfigError(Exception):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read config {path}: {reason}")
        self.path = path


def config_path() -> Path:
    # FILESORT_CONFIG_PATH wins over ~/.filesort.config
    if "FILESORT_CONFIG_PATH" in os.environ:
        return Path(os.environ["FILESORT_CONFIG_PATH"])
    return Path.home() / ".filesort.config"


def _deep_merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def load_config() -> dict[str, Any]:
    cfg = dict(_DEFAULT)
    for section in cfg:
        cfg[section] = dict(cfg[section])

    path = config_path()
    if path.exists():
        try:
            with open(path, "rb") as f:
                user_cfg = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(path, str(e)) from e
        cfg = _deep_merge(cfg, user_cfg)

    # Env var overrides
    if (icon := os.environ.get("FILESORT_ICON")) is not None:
        cfg["display"]["icon"] = icon
    if order := os.environ.get("FILESORT_ORDER"):
        cfg["display"]["order"] = order
    if level := os.environ.get("FILESORT_LOG_LEVEL"):
        cfg["log"]["level"] = level

    if cfg["display"]["order"] not in ORDERS:
        logger.warning(
            "ignoring display.order=%r (expected one of %s)",
            cfg["display"]["order"], ", ".join(ORDERS),
        )
        cfg["display"]["order"] = "category"

    return cfg


# Module-level singleton — loaded once per process
_config: dict[str, Any] | None = None


def get_config() -> dict[str, Any]:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_display_config() -> dict[str, Any]:
    return get_config()["display"]


def get_log_level() -> str:
    return str(get_config()["log"]["level"]).upper()
