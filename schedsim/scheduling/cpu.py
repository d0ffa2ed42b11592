"""Round-Robin CPU scheduler."""

from collections import deque
from typing import Optional, Tuple

from .process import Process, ProcessLocation, SimulationStateError
from ..core.event_queue import Event, EventType
from ..utils.logger import setup_logger


class Cpu:
    """Single CPU running the ready queue in Round-Robin order.

    Whenever a process is switched in, the CPU returns the one event that
    will next take it off the CPU: completion, an I/O request, or quantum
    expiry.
    """

    def __init__(self, quantum: float, statistics):
        """Initialize CPU.

        Args:
            quantum: Round-Robin time slice
            statistics: Statistics collector
        """
        if quantum <= 0:
            raise ValueError(f"Quantum must be positive, got {quantum}")

        self.quantum = quantum
        self.statistics = statistics
        self.logger = setup_logger(self.__class__.__name__)

        self._queue = deque()
        self._active_process: Optional[Process] = None

    @property
    def queue(self) -> Tuple[Process, ...]:
        """Snapshot of the ready queue."""
        return tuple(self._queue)

    @property
    def active_process(self) -> Optional[Process]:
        """Process currently on the CPU, if any."""
        return self._active_process

    def is_idle(self) -> bool:
        return self._active_process is None

    def insert_process(self, process: Process, now: float) -> Optional[Event]:
        """Add a process to the ready queue, switching it in if the CPU is idle.

        Args:
            process: Process coming from memory admission or the I/O device
            now: Current simulation time

        Returns:
            Follow-on event for a newly switched-in process, or None
        """
        process.relocate(
            ProcessLocation.READY_QUEUE,
            allowed=(ProcessLocation.MEMORY_QUEUE, ProcessLocation.IO_DEVICE),
        )
        self._queue.append(process)

        if self.is_idle():
            return self.switch_process(now)
        return None

    def switch_process(self, now: float) -> Optional[Event]:
        """Switch in the head of the ready queue.

        The active process, if any, goes to the back of the ready queue.
        With an empty ready queue the active process keeps the CPU for
        another slice.

        Args:
            now: Current simulation time

        Returns:
            Follow-on event for the process now on the CPU, or None if idle
        """
        if self._queue:
            previous = self._active_process
            if previous is not None:
                previous.left_cpu(now)
                previous.relocate(ProcessLocation.READY_QUEUE, allowed=(ProcessLocation.CPU,))
                self._queue.append(previous)
                self.statistics.nof_forced_process_switches += 1

            self._active_process = self._queue.popleft()
            self._active_process.relocate(ProcessLocation.CPU, allowed=(ProcessLocation.READY_QUEUE,))
            self._active_process.left_ready_queue(now)
            return self._generate_event(now)

        if self._active_process is not None:
            self._active_process.left_cpu(now)
            return self._generate_event(now)

        return None

    def active_process_left(self, now: float) -> Optional[Event]:
        """Clear the CPU after the active process finished or went to I/O.

        Args:
            now: Current simulation time

        Returns:
            Follow-on event for the next process switched in, or None
        """
        if self._active_process is None:
            raise SimulationStateError("No active process to remove from the CPU")
        self._active_process = None
        return self.switch_process(now)

    def time_passed(self, time_passed: float) -> None:
        """Account for time elapsed since the previous event.

        Args:
            time_passed: Elapsed simulated time
        """
        queue_length = len(self._queue)
        if queue_length > self.statistics.cpu_queue_largest_length:
            self.statistics.cpu_queue_largest_length = queue_length

        if self._active_process is not None:
            self.statistics.total_busy_cpu_time += time_passed

        self.statistics.cpu_queue_length_time += queue_length * time_passed

    def _generate_event(self, now: float) -> Event:
        """Pick the event that ends the active process's current slice.

        Comparisons are strict, so ties with the quantum end the slice
        with a switch.
        """
        process = self._active_process
        cpu_left = process.cpu_time_needed
        io_left = process.time_to_next_io

        if cpu_left < self.quantum and cpu_left < io_left:
            return Event(time=now + cpu_left, event_type=EventType.END_PROCESS)
        elif io_left < self.quantum:
            return Event(time=now + io_left, event_type=EventType.IO_REQUEST)
        else:
            return Event(time=now + self.quantum, event_type=EventType.SWITCH_PROCESS)

    def __repr__(self) -> str:
        active = self._active_process.process_id if self._active_process else None
        return f"Cpu(active={active}, ready={len(self._queue)}, quantum={self.quantum})"
