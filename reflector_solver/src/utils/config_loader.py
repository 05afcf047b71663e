"""Loads YAML/JSON configuration files and global solver settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_solver_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the solver configuration shipped with the package."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "solver_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


SOLVER_CONFIG: Dict[str, Any] = load_solver_config()
_PLATFORM_CONF = SOLVER_CONFIG.get("platform", {})
CYCLE_COUNT: int = int(_PLATFORM_CONF.get("cycle_count", 1_000_000_000))
SHORTCUT_ENABLED: bool = bool(_PLATFORM_CONF.get("shortcut", True))
VERIFY_STATES: bool = bool(_PLATFORM_CONF.get("verify_states", True))

_LENS_CONF = SOLVER_CONFIG.get("lens", {})
BOX_COUNT: int = int(_LENS_CONF.get("box_count", 256))

LOG_FILE: Optional[str] = SOLVER_CONFIG.get("log_file")


def set_cycle_count(value: int) -> None:
    """Override the number of spin cycles."""
    global CYCLE_COUNT
    CYCLE_COUNT = value
    SOLVER_CONFIG.setdefault("platform", {})["cycle_count"] = value


def set_shortcut_enabled(value: bool) -> None:
    """Enable or disable the cycle shortcut."""
    global SHORTCUT_ENABLED
    SHORTCUT_ENABLED = value
    SOLVER_CONFIG.setdefault("platform", {})["shortcut"] = value


def set_verify_states(value: bool) -> None:
    """Enable or disable full-state comparison on fingerprint matches."""
    global VERIFY_STATES
    VERIFY_STATES = value
    SOLVER_CONFIG.setdefault("platform", {})["verify_states"] = value


def set_log_file(value: Optional[str]) -> None:
    """Override the diagnostic log file path."""
    global LOG_FILE
    LOG_FILE = value
    SOLVER_CONFIG["log_file"] = value


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "cycle_count": CYCLE_COUNT,
        "shortcut": SHORTCUT_ENABLED,
        "verify_states": VERIFY_STATES,
        "box_count": BOX_COUNT,
        "log_file": LOG_FILE,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
