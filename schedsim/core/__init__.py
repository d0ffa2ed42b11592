"""Core simulation components."""

from .event_queue import Event, EventType, EventQueue
from .statistics import Statistics
from .sim_config import SimulationConfig
from .observer import SimulationObserver, CallbackObserver
from .simulator import Simulator

__all__ = [
    "Simulator",
    "Event",
    "EventType",
    "EventQueue",
    "Statistics",
    "SimulationConfig",
    "SimulationObserver",
    "CallbackObserver",
]
