from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULTS: Dict[str, Any] = {
    "blank_char": "X",
    "blank_markers": "X.",
    "solution_suffix": ".sln.txt",
    "write_solution": True,
    "quiet": False,
}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_config(path: str | Path | None = None, **overrides) -> DotDict:
    """DEFAULTS, then the YAML file (if any), then non-None overrides."""
    cfg = DotDict(DEFAULTS)
    if path is not None:
        data = load_yaml(path)
        unknown = set(data) - set(DEFAULTS)
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {sorted(unknown)}")
        cfg.update(data)
    merge_overrides(cfg, **overrides)
    return cfg
