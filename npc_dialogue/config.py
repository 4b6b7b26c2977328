"""Runtime configuration (data files, load policy, logging)."""

import json
import os
from pathlib import Path
from typing import Any

_CONFIG_DEFAULTS: dict[str, Any] = {
    "npcs_file": "npcs.json",
    "items_file": "items.json",
    "strict_load": False,
    "log_level": "INFO",
}

_ENV_PREFIX = "NPC_DIALOGUE_"
_TRUE_VALUES = {"1", "true", "yes", "on"}


def default_data_dir() -> Path:
    return Path(os.getenv(f"{_ENV_PREFIX}DATA_DIR", "data"))


def get_config(data_dir: Path) -> dict[str, Any]:
    """Read config: defaults, then `{data_dir}/config.json`, then environment."""
    config = dict(_CONFIG_DEFAULTS)
    path = data_dir / "config.json"
    if path.is_file():
        stored = json.loads(path.read_text())
        for key in _CONFIG_DEFAULTS:
            if key in stored:
                config[key] = stored[key]

    strict = os.getenv(f"{_ENV_PREFIX}STRICT_LOAD")
    if strict is not None:
        config["strict_load"] = strict.strip().lower() in _TRUE_VALUES
    level = os.getenv(f"{_ENV_PREFIX}LOG_LEVEL")
    if level:
        config["log_level"] = level.upper()
    return config


def npcs_path(data_dir: Path, config: dict[str, Any]) -> Path:
    return data_dir / config["npcs_file"]


def items_path(data_dir: Path, config: dict[str, Any]) -> Path:
    return data_dir / config["items_file"]
