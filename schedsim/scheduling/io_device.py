"""Single I/O device with a FIFO request queue."""

from collections import deque
from typing import Optional, Tuple

from .process import Process, ProcessLocation, SimulationStateError
from ..core.event_queue import Event, EventType
from ..utils.logger import setup_logger


class Io:
    """I/O device serving one request at a time in arrival order."""

    def __init__(self, avg_io_duration: float, statistics, generator):
        """Initialize I/O device.

        Args:
            avg_io_duration: Mean duration of an I/O operation
            statistics: Statistics collector
            generator: Duration generator for operation lengths and I/O intervals
        """
        if avg_io_duration <= 0:
            raise ValueError(f"Average I/O duration must be positive, got {avg_io_duration}")

        self.avg_io_duration = avg_io_duration
        self.statistics = statistics
        self.generator = generator
        self.logger = setup_logger(self.__class__.__name__)

        self._queue = deque()
        self._active_process: Optional[Process] = None

    @property
    def queue(self) -> Tuple[Process, ...]:
        """Snapshot of the I/O queue."""
        return tuple(self._queue)

    @property
    def active_process(self) -> Optional[Process]:
        """Process currently using the device, if any."""
        return self._active_process

    def is_idle(self) -> bool:
        return self._active_process is None

    def add_io_request(self, process: Process, now: float) -> Optional[Event]:
        """Queue an I/O request from the process leaving the CPU.

        Args:
            process: Requesting process
            now: Current simulation time

        Returns:
            END_IO event if the operation started right away, else None
        """
        process.relocate(ProcessLocation.IO_QUEUE, allowed=(ProcessLocation.CPU,))
        process.left_cpu(now)
        self._queue.append(process)

        if self.is_idle():
            return self.start_io_operation(now)
        return None

    def start_io_operation(self, now: float) -> Optional[Event]:
        """Start serving the head of the queue if the device is free.

        Args:
            now: Current simulation time

        Returns:
            END_IO event for the started operation, or None
        """
        if self._active_process is not None or not self._queue:
            return None

        process = self._queue.popleft()
        process.relocate(ProcessLocation.IO_DEVICE, allowed=(ProcessLocation.IO_QUEUE,))
        process.left_io_queue(now)
        self._active_process = process

        duration = self.generator.io_duration(self.avg_io_duration)
        self.logger.debug(f"I/O for process {process.process_id} until {now + duration}")
        return Event(time=now + duration, event_type=EventType.END_IO)

    def remove_active_process(self, now: float) -> Process:
        """Detach the process whose I/O operation just finished.

        Args:
            now: Current simulation time

        Returns:
            The process that was using the device

        Raises:
            SimulationStateError: If the device is idle
        """
        process = self._active_process
        if process is None:
            raise SimulationStateError("No active process on the I/O device")

        self._active_process = None
        process.left_io(now, self.generator.next_io_interval(process.avg_io_interval))
        return process

    def time_passed(self, time_passed: float) -> None:
        """Account for time elapsed since the previous event.

        Args:
            time_passed: Elapsed simulated time
        """
        queue_length = len(self._queue)
        if queue_length > self.statistics.io_queue_largest_length:
            self.statistics.io_queue_largest_length = queue_length

        self.statistics.io_queue_length_time += queue_length * time_passed
        if self._active_process is not None:
            self.statistics.total_busy_io_time += time_passed

    def __repr__(self) -> str:
        active = self._active_process.process_id if self._active_process else None
        return f"Io(active={active}, queued={len(self._queue)})"
