"""Event queue implementation for discrete event simulation."""

import heapq
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional


class EventType(Enum):
    """Types of events in the simulation."""
    # Workload
    NEW_PROCESS = "new_process"

    # CPU
    SWITCH_PROCESS = "switch_process"
    END_PROCESS = "end_process"

    # I/O device
    IO_REQUEST = "io_request"
    END_IO = "end_io"


@dataclass(order=True)
class Event:
    """Event in the discrete event simulation.

    Attributes:
        time: Event timestamp
        event_type: Type of event
        sequence: Insertion order, stamped by the queue for tie-breaking
    """
    time: float
    event_type: EventType = field(compare=False)
    sequence: int = field(default=0)

    def __post_init__(self):
        """Validate event after initialization."""
        if self.time < 0:
            raise ValueError("Event time cannot be negative")

    def __repr__(self) -> str:
        return f"Event({self.event_type.name} @ {self.time})"


class EventQueue:
    """Priority queue for managing simulation events.

    Events are ordered by time, with earlier events processed first.
    Events at the same time come out in the order they were pushed.
    """

    def __init__(self):
        """Initialize empty event queue."""
        self._queue = []
        self._event_count = 0

    def push(self, event: Event) -> None:
        """Add event to the queue.

        Args:
            event: Event to add
        """
        event.sequence = self._event_count
        self._event_count += 1
        heapq.heappush(self._queue, event)

    insert = push

    def pop(self) -> Event:
        """Remove and return the next event.

        Returns:
            Next event to process

        Raises:
            IndexError: If queue is empty
        """
        if self.is_empty():
            raise IndexError("Cannot pop from empty event queue")
        return heapq.heappop(self._queue)

    def pop_earliest(self) -> Optional[Event]:
        """Remove and return the next event, or None if queue is empty."""
        if self.is_empty():
            return None
        return heapq.heappop(self._queue)

    def peek(self) -> Optional[Event]:
        """Return the next event without removing it.

        Returns:
            Next event, or None if queue is empty
        """
        return self._queue[0] if self._queue else None

    def is_empty(self) -> bool:
        """Check if queue is empty.

        Returns:
            True if queue is empty
        """
        return len(self._queue) == 0

    def size(self) -> int:
        """Get number of events in queue.

        Returns:
            Number of events
        """
        return len(self._queue)

    def clear(self) -> None:
        """Remove all events from queue."""
        self._queue.clear()

    def __len__(self) -> int:
        """Get number of events in queue."""
        return len(self._queue)

    def __repr__(self) -> str:
        """String representation of event queue."""
        return f"EventQueue(size={len(self._queue)}, next={self.peek()})"
