"""Main simulator class orchestrating the discrete event simulation."""

import time
from typing import Dict, Optional, Tuple, Union

from .event_queue import Event, EventType, EventQueue
from .observer import SimulationObserver
from .sim_config import SimulationConfig
from .statistics import Statistics
from ..scheduling.process import Process, ProcessLocation, SimulationStateError
from ..scheduling.memory import Memory
from ..scheduling.cpu import Cpu
from ..scheduling.io_device import Io
from ..workload.duration_generator import DurationGenerator, create_generator
from ..utils.logger import setup_logger


class Simulator:
    """Discrete event simulator of a single-CPU Round-Robin scheduler.

    This class owns the clock and the event queue, and routes each event
    to the managers:
    - Memory admission
    - CPU Round-Robin scheduling
    - The I/O device
    - Statistics collection

    The managers only ever touch their own queues. The simulator moves
    processes between them and pushes back whatever follow-on event they
    return.
    """

    def __init__(self,
                 config: Union[SimulationConfig, Dict],
                 generator: Optional[DurationGenerator] = None,
                 observer: Optional[SimulationObserver] = None):
        """Initialize simulator.

        Args:
            config: Simulation configuration, or a dictionary to build one from
            generator: Duration generator; built from the config if omitted
            observer: Optional observer notified on every step
        """
        if not isinstance(config, SimulationConfig):
            config = SimulationConfig.from_dict(config)

        self.config = config
        self.logger = setup_logger(self.__class__.__name__)
        self.observer = observer

        # Simulation state
        self.clock = 0
        self.event_queue = EventQueue()
        self.simulation_duration = config.duration
        self.avg_arrival_interval = config.avg_arrival_interval

        self.generator = generator or create_generator(config.generator, config.random_seed)

        # Components
        self.statistics = Statistics(config.memory_size)
        self.memory = Memory(config.memory_size, self.statistics)
        self.cpu = Cpu(config.quantum, self.statistics)
        self.io = Io(config.avg_io_duration, self.statistics, self.generator)

        self._next_process_id = 1
        self._started = False

        self.logger.info("Simulator initialized")
        self.logger.info(
            f"Memory: {config.memory_size}, quantum: {config.quantum}, "
            f"avg I/O: {config.avg_io_duration}, duration: {config.duration}"
        )

    # Read-only views for presentation layers

    @property
    def memory_queue(self) -> Tuple[Process, ...]:
        return self.memory.queue

    @property
    def cpu_queue(self) -> Tuple[Process, ...]:
        return self.cpu.queue

    @property
    def io_queue(self) -> Tuple[Process, ...]:
        return self.io.queue

    def run(self) -> Dict:
        """Run the simulation until the horizon or until no events remain.

        Returns:
            Dictionary containing the final statistics report
        """
        start_time = time.time()
        self.logger.info("Starting simulation...")

        while self.step() is not None:
            pass

        results = self._finalize()

        elapsed_time = time.time() - start_time
        self.logger.info(f"Simulation completed in {elapsed_time:.2f}s")

        return results

    def is_finished(self) -> bool:
        """Check whether the loop has reached a terminal state."""
        return self.clock >= self.simulation_duration or self.event_queue.is_empty()

    def step(self) -> Optional[Event]:
        """Process a single event.

        Returns:
            The processed event, or None once the simulation is finished
        """
        if not self._started:
            self._initialize()

        if self.is_finished():
            return None

        event = self.event_queue.pop()
        time_difference = event.time - self.clock
        self.clock = event.time

        self._notify('on_time_step', time_difference)

        self.memory.time_passed(time_difference)
        self.cpu.time_passed(time_difference)
        self.io.time_passed(time_difference)

        if self.clock < self.simulation_duration:
            self._process_event(event)

        self._notify('on_event_handled', time_difference)
        return event

    def _initialize(self) -> None:
        """Seed the event queue with the first arrival."""
        self._started = True
        self._schedule(Event(time=0, event_type=EventType.NEW_PROCESS))

    def _schedule(self, event: Optional[Event]) -> None:
        if event is not None:
            self.event_queue.push(event)

    def _notify(self, hook: str, time_difference: float) -> None:
        """Call an observer hook, isolating the loop from its failures."""
        if self.observer is None:
            return
        try:
            getattr(self.observer, hook)(time_difference)
        except Exception:
            self.logger.debug(f"Observer {hook} failed", exc_info=True)

    def _process_event(self, event: Event) -> None:
        """Process a single event.

        Args:
            event: Event to process
        """
        self.logger.debug(f"[t={self.clock}] {event.event_type.name}")

        handler = {
            EventType.NEW_PROCESS: self._handle_new_process,
            EventType.SWITCH_PROCESS: self._handle_switch_process,
            EventType.END_PROCESS: self._handle_end_process,
            EventType.IO_REQUEST: self._handle_io_request,
            EventType.END_IO: self._handle_end_io,
        }[event.event_type]

        handler(event)

    def _create_process(self) -> Process:
        """Create a process with demands drawn from the duration generator."""
        cpu_time = self.generator.cpu_time()
        avg_io_interval = self.generator.io_interval(cpu_time)

        process = Process(
            process_id=self._next_process_id,
            memory_needed=self.generator.memory_demand(self.memory.memory_size),
            cpu_time_needed=cpu_time,
            avg_io_interval=avg_io_interval,
            time_to_next_io=self.generator.next_io_interval(avg_io_interval),
            creation_time=self.clock,
        )
        self._next_process_id += 1
        return process

    def _transfer_memory_to_ready(self) -> None:
        """Move processes into the ready queue for as long as memory allows."""
        process = self.memory.check_memory(self.clock)
        while process is not None:
            self._schedule(self.cpu.insert_process(process, self.clock))
            process = self.memory.check_memory(self.clock)

    def _require_active_process(self) -> Process:
        process = self.cpu.active_process
        if process is None:
            raise SimulationStateError(f"No process on the CPU at t={self.clock}")
        return process

    def _handle_new_process(self, event: Event) -> None:
        """Handle a process arrival."""
        process = self._create_process()
        self.memory.insert_process(process)
        self._transfer_memory_to_ready()

        next_arrival = self.clock + self.generator.arrival_interval(self.avg_arrival_interval)
        self._schedule(Event(time=next_arrival, event_type=EventType.NEW_PROCESS))

        self.statistics.nof_created_processes += 1

    def _handle_switch_process(self, event: Event) -> None:
        """Handle quantum expiry."""
        self._schedule(self.cpu.switch_process(self.clock))

    def _handle_end_process(self, event: Event) -> None:
        """Handle the active process finishing, releasing its resources."""
        process = self._require_active_process()
        process.left_cpu(self.clock)
        process.relocate(ProcessLocation.TERMINATED, allowed=(ProcessLocation.CPU,))

        self.memory.process_completed(process)
        process.update_statistics(self.statistics)

        self._schedule(self.cpu.active_process_left(self.clock))

        # Freed memory may admit waiting processes
        self._transfer_memory_to_ready()

    def _handle_io_request(self, event: Event) -> None:
        """Handle the active process leaving the CPU for I/O."""
        process = self._require_active_process()
        self._schedule(self.io.add_io_request(process, self.clock))
        self._schedule(self.cpu.active_process_left(self.clock))

    def _handle_end_io(self, event: Event) -> None:
        """Handle an I/O operation completing."""
        process = self.io.remove_active_process(self.clock)
        self._schedule(self.cpu.insert_process(process, self.clock))
        self._schedule(self.io.start_io_operation(self.clock))

        self.statistics.nof_processed_io_operations += 1

    def _finalize(self) -> Dict:
        """Finalize simulation and compute results.

        Returns:
            Dictionary containing all results and metrics
        """
        self.logger.info("Finalizing simulation...")

        results = self.statistics.compute_report(self.clock)
        results['config'] = self.config.to_dict()

        self.logger.info("\n" + self.statistics.get_summary(self.clock))
        return results
