"""Workload generation: arrival gaps, process demands and I/O durations."""

from .duration_generator import (
    DurationGenerator,
    RandomDurationGenerator,
    ExponentialDurationGenerator,
    ConstantDurationGenerator,
    create_generator,
)

__all__ = [
    "DurationGenerator",
    "RandomDurationGenerator",
    "ExponentialDurationGenerator",
    "ConstantDurationGenerator",
    "create_generator",
]
