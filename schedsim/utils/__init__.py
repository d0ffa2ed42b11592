"""Utility functions and helpers."""

from .logger import setup_logger
from .io import save_json, load_json, save_yaml

__all__ = ["setup_logger", "save_json", "load_json", "save_yaml"]
