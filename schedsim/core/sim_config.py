"""Simulation parameters and their validation."""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class SimulationConfig:
    """Parameters of one scheduler simulation run.

    All sizes and durations share the simulator's abstract time unit.
    Invalid values are rejected here, before any simulation state exists.
    """

    memory_size: int
    quantum: float
    avg_io_duration: float
    duration: float
    avg_arrival_interval: float

    # Workload
    generator: str = 'uniform'
    random_seed: Optional[int] = None

    def __post_init__(self):
        """Validate that every parameter is positive."""
        for name in ('memory_size', 'quantum', 'avg_io_duration',
                     'duration', 'avg_arrival_interval'):
            value = getattr(self, name)
            if value is None or value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

    @classmethod
    def from_dict(cls, config: Dict) -> 'SimulationConfig':
        """Build from a nested configuration dictionary.

        Args:
            config: Dictionary with simulation/memory/cpu/io/workload sections

        Returns:
            Validated configuration
        """
        simulation = config.get('simulation', {})
        workload = config.get('workload', {})

        return cls(
            memory_size=config.get('memory', {}).get('size'),
            quantum=config.get('cpu', {}).get('quantum'),
            avg_io_duration=config.get('io', {}).get('avg_duration'),
            duration=simulation.get('duration'),
            avg_arrival_interval=workload.get('avg_arrival_interval'),
            generator=workload.get('generator', 'uniform'),
            random_seed=simulation.get('random_seed'),
        )

    def to_dict(self) -> Dict:
        """Inverse of :meth:`from_dict`."""
        return {
            'simulation': {'duration': self.duration, 'random_seed': self.random_seed},
            'memory': {'size': self.memory_size},
            'cpu': {'quantum': self.quantum},
            'io': {'avg_duration': self.avg_io_duration},
            'workload': {
                'avg_arrival_interval': self.avg_arrival_interval,
                'generator': self.generator,
            },
        }
