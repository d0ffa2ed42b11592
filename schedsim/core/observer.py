"""Observer hooks for presentation layers watching a simulation."""

from typing import Callable, Optional


class SimulationObserver:
    """Receives synchronous notifications from the simulation loop.

    Observers may read the simulator's public accessors but must not
    mutate it. Exceptions raised here are logged and discarded by the
    simulator.
    """

    def on_time_step(self, time_passed: float) -> None:
        """Called after the clock advanced, before the event is handled."""

    def on_event_handled(self, time_passed: float) -> None:
        """Called once the current event has been fully handled."""


class CallbackObserver(SimulationObserver):
    """Observer built from plain callables."""

    def __init__(self,
                 on_time_step: Optional[Callable[[float], None]] = None,
                 on_event_handled: Optional[Callable[[float], None]] = None):
        self._on_time_step = on_time_step
        self._on_event_handled = on_event_handled

    def on_time_step(self, time_passed: float) -> None:
        if self._on_time_step is not None:
            self._on_time_step(time_passed)

    def on_event_handled(self, time_passed: float) -> None:
        if self._on_event_handled is not None:
            self._on_event_handled(time_passed)
