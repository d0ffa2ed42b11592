"""Resource managers: memory admission, Round-Robin CPU and the I/O device."""

from .process import Process, ProcessLocation, SimulationStateError
from .memory import Memory
from .cpu import Cpu
from .io_device import Io

__all__ = [
    "Process",
    "ProcessLocation",
    "SimulationStateError",
    "Memory",
    "Cpu",
    "Io",
]
