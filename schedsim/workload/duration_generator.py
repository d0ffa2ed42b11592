"""Duration sources for arrivals, CPU bursts and I/O operations.

The simulator never samples randomness itself. Every duration or demand
comes from a generator implementing :class:`DurationGenerator`, so runs
can be made deterministic by swapping in :class:`ConstantDurationGenerator`.
"""

import math
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

# Process shape used by the random generators
MIN_CPU_TIME = 100
CPU_TIME_SPREAD = 9900
MIN_MEMORY_DEMAND = 100
MAX_IO_FREQUENCY = 25


class DurationGenerator(ABC):
    """Source of non-negative durations and process demands."""

    @abstractmethod
    def arrival_interval(self, mean: float) -> float:
        """Time until the next process arrival."""

    @abstractmethod
    def memory_demand(self, memory_size: int) -> int:
        """Memory needed by a new process."""

    @abstractmethod
    def cpu_time(self) -> float:
        """Total CPU time needed by a new process."""

    @abstractmethod
    def io_interval(self, cpu_time_needed: float) -> float:
        """Average CPU time between I/O requests for a new process."""

    @abstractmethod
    def next_io_interval(self, avg_io_interval: float) -> float:
        """CPU time until the next I/O request."""

    @abstractmethod
    def io_duration(self, mean: float) -> float:
        """Length of one I/O operation."""


class RandomDurationGenerator(DurationGenerator):
    """Uniformly distributed durations centred on the configured means.

    Gaps are ``1 + U[0, 2*mean)`` so the mean is kept and no gap is zero.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def _spread(self, mean: float) -> int:
        return 1 + int(self.rng.uniform(0, 2 * mean))

    def arrival_interval(self, mean: float) -> float:
        return self._spread(mean)

    def memory_demand(self, memory_size: int) -> int:
        return MIN_MEMORY_DEMAND + int(self.rng.uniform(0, memory_size / 4))

    def cpu_time(self) -> float:
        return MIN_CPU_TIME + int(self.rng.uniform(0, CPU_TIME_SPREAD))

    def io_interval(self, cpu_time_needed: float) -> float:
        # Between 1% and 25% of the total CPU need
        frequency = 1 + int(self.rng.integers(0, MAX_IO_FREQUENCY))
        return frequency * cpu_time_needed / 100

    def next_io_interval(self, avg_io_interval: float) -> float:
        return self._spread(avg_io_interval)

    def io_duration(self, mean: float) -> float:
        return self._spread(mean)


class ExponentialDurationGenerator(RandomDurationGenerator):
    """Memoryless arrivals, I/O gaps and I/O service times."""

    def arrival_interval(self, mean: float) -> float:
        return float(self.rng.exponential(mean))

    def next_io_interval(self, avg_io_interval: float) -> float:
        return float(self.rng.exponential(avg_io_interval))

    def io_duration(self, mean: float) -> float:
        return float(self.rng.exponential(mean))


class ConstantDurationGenerator(DurationGenerator):
    """Fixed values, for deterministic runs.

    ``arrival_interval`` and ``io_duration`` return the configured means
    unless overridden. An ``io_interval`` of ``math.inf`` means processes
    never request I/O.
    """

    def __init__(self,
                 memory_demand: int = MIN_MEMORY_DEMAND,
                 cpu_time: float = 1000,
                 io_interval: float = math.inf,
                 arrival_interval: Optional[float] = None,
                 io_duration: Optional[float] = None):
        self._memory_demand = memory_demand
        self._cpu_time = cpu_time
        self._io_interval = io_interval
        self._arrival_interval = arrival_interval
        self._io_duration = io_duration

    def arrival_interval(self, mean: float) -> float:
        return mean if self._arrival_interval is None else self._arrival_interval

    def memory_demand(self, memory_size: int) -> int:
        return self._memory_demand

    def cpu_time(self) -> float:
        return self._cpu_time

    def io_interval(self, cpu_time_needed: float) -> float:
        return self._io_interval

    def next_io_interval(self, avg_io_interval: float) -> float:
        return avg_io_interval

    def io_duration(self, mean: float) -> float:
        return mean if self._io_duration is None else self._io_duration


def create_generator(kind: str = 'uniform', seed: Optional[int] = None) -> DurationGenerator:
    """Build a duration generator by name.

    Args:
        kind: 'uniform', 'exponential' or 'constant'
        seed: Random seed for the random generators

    Returns:
        Duration generator
    """
    if kind == 'uniform':
        return RandomDurationGenerator(seed)
    elif kind == 'exponential':
        return ExponentialDurationGenerator(seed)
    elif kind == 'constant':
        return ConstantDurationGenerator()
    else:
        raise ValueError(f"Unknown duration generator: {kind}")
