"""Process entity moved between the memory, CPU and I/O managers."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class ProcessLocation(Enum):
    """Where a process currently lives."""
    NEW = "new"
    MEMORY_QUEUE = "memory_queue"
    READY_QUEUE = "ready_queue"
    CPU = "cpu"
    IO_QUEUE = "io_queue"
    IO_DEVICE = "io_device"
    TERMINATED = "terminated"


class SimulationStateError(RuntimeError):
    """Raised when a manager is asked to do something its state forbids."""


@dataclass
class Process:
    """Represents a simulated process.

    Timing fields accumulate the time spent in each location. Every
    ``left_*`` call charges the time since the previous transition to
    the location being left.
    """
    process_id: int
    memory_needed: int
    cpu_time_needed: float
    avg_io_interval: float
    time_to_next_io: float
    creation_time: float

    location: ProcessLocation = ProcessLocation.NEW
    time_of_last_event: Optional[float] = None

    # Time accumulators
    time_spent_in_memory_queue: float = 0.0
    time_spent_in_ready_queue: float = 0.0
    time_spent_in_cpu: float = 0.0
    time_spent_waiting_for_io: float = 0.0
    time_spent_in_io: float = 0.0

    # Visit counters
    nof_times_in_ready_queue: int = 0
    nof_times_in_io_queue: int = 0

    def __post_init__(self):
        if self.time_of_last_event is None:
            self.time_of_last_event = self.creation_time

    def relocate(self, target: ProcessLocation, allowed: Iterable[ProcessLocation]) -> None:
        """Move to ``target``, checking that the current location permits it.

        Raises:
            SimulationStateError: If the process is somewhere else
        """
        allowed = tuple(allowed)
        if self.location not in allowed:
            raise SimulationStateError(
                f"Process {self.process_id} cannot move to {target.value} "
                f"from {self.location.value}"
            )
        self.location = target

    def _elapsed(self, now: float) -> float:
        elapsed = now - self.time_of_last_event
        self.time_of_last_event = now
        return elapsed

    def left_memory_queue(self, now: float) -> None:
        self.time_spent_in_memory_queue += self._elapsed(now)

    def left_ready_queue(self, now: float) -> None:
        self.time_spent_in_ready_queue += self._elapsed(now)
        self.nof_times_in_ready_queue += 1

    def left_cpu(self, now: float) -> None:
        """Charge the CPU slice that just ended against remaining needs."""
        elapsed = self._elapsed(now)
        self.time_spent_in_cpu += elapsed
        self.cpu_time_needed = max(0, self.cpu_time_needed - elapsed)
        self.time_to_next_io = max(0, self.time_to_next_io - elapsed)

    def left_io_queue(self, now: float) -> None:
        self.time_spent_waiting_for_io += self._elapsed(now)
        self.nof_times_in_io_queue += 1

    def left_io(self, now: float, next_io_interval: float) -> None:
        """Leave the I/O device with a fresh interval until the next I/O need."""
        self.time_spent_in_io += self._elapsed(now)
        self.time_to_next_io = next_io_interval

    def update_statistics(self, statistics) -> None:
        """Fold this finished process into the global statistics.

        Args:
            statistics: Statistics collector
        """
        statistics.total_time_in_system += self.time_of_last_event - self.creation_time
        statistics.total_time_waiting_for_memory += self.time_spent_in_memory_queue
        statistics.total_time_in_ready_queue += self.time_spent_in_ready_queue
        statistics.total_time_in_cpu += self.time_spent_in_cpu
        statistics.total_time_waiting_for_io += self.time_spent_waiting_for_io
        statistics.total_time_in_io += self.time_spent_in_io
        statistics.total_nof_times_in_ready_queue += self.nof_times_in_ready_queue
        statistics.total_nof_times_in_io_queue += self.nof_times_in_io_queue
        statistics.nof_completed_processes += 1

    def __repr__(self) -> str:
        return (f"Process(id={self.process_id}, mem={self.memory_needed}, "
                f"cpu_left={self.cpu_time_needed}, at={self.location.value})")
