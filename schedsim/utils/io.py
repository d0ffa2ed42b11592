# schedsim/utils/io.py
"""
IO helpers for writing simulation results to disk.
"""
import json
from typing import Any
from pathlib import Path

import numpy as np
import yaml


def _to_builtin(obj: Any) -> Any:
    """Convert numpy scalars and containers to plain Python types."""
    if isinstance(obj, dict):
        return {str(k): _to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_builtin(v) for v in obj]
    if isinstance(obj, np.generic):
        return obj.item()
    return obj


def save_json(obj: Any, file_path: str, indent: int = 2):
    """Save object as JSON."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(_to_builtin(obj), f, indent=indent)


def load_json(file_path: str) -> Any:
    """Load JSON file."""
    with open(file_path, 'r') as f:
        return json.load(f)


def save_yaml(obj: Any, file_path: str):
    """Save object as YAML."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        yaml.safe_dump(_to_builtin(obj), f, default_flow_style=False, sort_keys=False)
