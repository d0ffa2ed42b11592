"""Bounded memory admission controller."""

from collections import deque
from typing import Optional, Tuple

from .process import Process, ProcessLocation, SimulationStateError
from ..utils.logger import setup_logger


class Memory:
    """Admits waiting processes into memory in arrival order.

    Only the head of the wait queue is ever considered. A head that does
    not fit blocks everyone behind it, and a process larger than the
    whole memory stays parked there for good.
    """

    def __init__(self, memory_size: int, statistics):
        """Initialize memory manager.

        Args:
            memory_size: Total memory capacity
            statistics: Statistics collector
        """
        if memory_size <= 0:
            raise ValueError(f"Memory size must be positive, got {memory_size}")

        self.memory_size = memory_size
        self.statistics = statistics
        self.logger = setup_logger(self.__class__.__name__)

        self._queue = deque()
        self._allocated = 0

    @property
    def queue(self) -> Tuple[Process, ...]:
        """Snapshot of the memory wait queue."""
        return tuple(self._queue)

    @property
    def allocated(self) -> int:
        return self._allocated

    @property
    def free_memory(self) -> int:
        return self.memory_size - self._allocated

    def insert_process(self, process: Process) -> None:
        """Append a newly created process to the wait queue.

        Args:
            process: Process to admit later
        """
        process.relocate(ProcessLocation.MEMORY_QUEUE, allowed=(ProcessLocation.NEW,))
        self._queue.append(process)

    def check_memory(self, now: float) -> Optional[Process]:
        """Admit the head of the wait queue if it fits in free memory.

        Callers should keep calling until None is returned.

        Args:
            now: Current simulation time

        Returns:
            The admitted process, or None if the head does not fit
        """
        if not self._queue:
            return None

        head = self._queue[0]
        if head.memory_needed > self.free_memory:
            return None

        self._queue.popleft()
        self._allocated += head.memory_needed
        head.left_memory_queue(now)
        self.logger.debug(
            f"Admitted process {head.process_id} ({head.memory_needed}), "
            f"{self.free_memory} free"
        )
        return head

    def process_completed(self, process: Process) -> None:
        """Release the memory held by a finished process.

        Args:
            process: Finished process
        """
        if process.memory_needed > self._allocated:
            raise SimulationStateError(
                f"Process {process.process_id} releases {process.memory_needed} "
                f"but only {self._allocated} is allocated"
            )
        self._allocated -= process.memory_needed

    def time_passed(self, time_passed: float) -> None:
        """Account for time elapsed since the previous event.

        Args:
            time_passed: Elapsed simulated time
        """
        queue_length = len(self._queue)
        if queue_length > self.statistics.memory_queue_largest_length:
            self.statistics.memory_queue_largest_length = queue_length

        self.statistics.memory_queue_length_time += queue_length * time_passed
        self.statistics.memory_usage_time += self._allocated * time_passed

    def __repr__(self) -> str:
        return f"Memory(allocated={self._allocated}/{self.memory_size}, waiting={len(self._queue)})"
