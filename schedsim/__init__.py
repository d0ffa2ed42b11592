"""SchedSim: discrete event simulator of a Round-Robin OS scheduler."""

from .core.event_queue import Event, EventType, EventQueue
from .core.simulator import Simulator
from .core.sim_config import SimulationConfig
from .core.statistics import Statistics
from .core.observer import SimulationObserver, CallbackObserver
from .scheduling import Process, ProcessLocation, SimulationStateError, Memory, Cpu, Io
from .workload import ConstantDurationGenerator, RandomDurationGenerator
from .utils.logger import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Simulator",
    "SimulationConfig",
    "Statistics",
    "SimulationObserver",
    "CallbackObserver",
    "Event",
    "EventType",
    "EventQueue",
    "Process",
    "ProcessLocation",
    "SimulationStateError",
    "Memory",
    "Cpu",
    "Io",
    "ConstantDurationGenerator",
    "RandomDurationGenerator",
    "setup_logger",
]
