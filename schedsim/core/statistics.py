"""Statistics accumulation and final report for the scheduler simulation."""

from typing import Dict

from ..utils.logger import setup_logger


class Statistics:
    """Additive accumulators fed by the resource managers and event handlers.

    Managers add time-weighted sums in their ``time_passed`` hooks, using
    the delta since the previous event. Per-process totals are folded in
    when a process finishes. Nothing here ever decreases.
    """

    def __init__(self, memory_size: int = 0):
        """Initialize statistics collector.

        Args:
            memory_size: Memory capacity, used for memory utilization
        """
        self.memory_size = memory_size
        self.logger = setup_logger(self.__class__.__name__)

        # Counters
        self.nof_created_processes = 0
        self.nof_completed_processes = 0
        self.nof_forced_process_switches = 0
        self.nof_processed_io_operations = 0

        # CPU
        self.total_busy_cpu_time = 0.0
        self.cpu_queue_length_time = 0.0
        self.cpu_queue_largest_length = 0

        # Memory
        self.memory_queue_length_time = 0.0
        self.memory_queue_largest_length = 0
        self.memory_usage_time = 0.0

        # I/O
        self.io_queue_length_time = 0.0
        self.io_queue_largest_length = 0
        self.total_busy_io_time = 0.0

        # Per-process totals, filled in at completion
        self.total_time_in_system = 0.0
        self.total_time_waiting_for_memory = 0.0
        self.total_time_in_ready_queue = 0.0
        self.total_time_in_cpu = 0.0
        self.total_time_waiting_for_io = 0.0
        self.total_time_in_io = 0.0
        self.total_nof_times_in_ready_queue = 0
        self.total_nof_times_in_io_queue = 0

    def compute_report(self, total_time: float) -> Dict:
        """Compute averages and utilizations over the elapsed simulated time.

        Args:
            total_time: Elapsed simulated time

        Returns:
            Dictionary of report values
        """
        completed = self.nof_completed_processes

        def per_time(value: float) -> float:
            return value / total_time if total_time > 0 else 0.0

        def per_process(value: float) -> float:
            return value / completed if completed > 0 else 0.0

        idle_cpu_time = max(0.0, total_time - self.total_busy_cpu_time)
        memory_capacity_time = self.memory_size * total_time

        return {
            'simulation_time': total_time,
            'created_processes': self.nof_created_processes,
            'completed_processes': completed,
            'forced_process_switches': self.nof_forced_process_switches,
            'processed_io_operations': self.nof_processed_io_operations,
            'throughput': per_time(completed),

            'cpu_busy_time': self.total_busy_cpu_time,
            'cpu_idle_time': idle_cpu_time,
            'cpu_utilization': per_time(self.total_busy_cpu_time),

            'max_memory_queue_length': self.memory_queue_largest_length,
            'mean_memory_queue_length': per_time(self.memory_queue_length_time),
            'memory_utilization': (self.memory_usage_time / memory_capacity_time
                                   if memory_capacity_time > 0 else 0.0),

            'max_cpu_queue_length': self.cpu_queue_largest_length,
            'mean_cpu_queue_length': per_time(self.cpu_queue_length_time),

            'max_io_queue_length': self.io_queue_largest_length,
            'mean_io_queue_length': per_time(self.io_queue_length_time),
            'io_utilization': per_time(self.total_busy_io_time),

            # Every completed process went through the memory queue once
            'mean_times_in_memory_queue': 1.0 if completed > 0 else 0.0,
            'mean_times_in_cpu_queue': per_process(self.total_nof_times_in_ready_queue),
            'mean_times_in_io_queue': per_process(self.total_nof_times_in_io_queue),

            'mean_time_in_system': per_process(self.total_time_in_system),
            'mean_time_waiting_for_memory': per_process(self.total_time_waiting_for_memory),
            'mean_time_waiting_for_cpu': per_process(self.total_time_in_ready_queue),
            'mean_time_processing': per_process(self.total_time_in_cpu),
            'mean_time_waiting_for_io': per_process(self.total_time_waiting_for_io),
            'mean_time_in_io': per_process(self.total_time_in_io),
        }

    def get_summary(self, total_time: float) -> str:
        """Get human-readable summary of the run.

        Args:
            total_time: Elapsed simulated time

        Returns:
            Formatted report
        """
        r = self.compute_report(total_time)
        idle_fraction = 1.0 - r['cpu_utilization'] if total_time > 0 else 0.0

        summary = [
            "=== Simulation Statistics ===",
            f"Number of completed processes:                       {r['completed_processes']}",
            f"Number of created processes:                         {r['created_processes']}",
            f"Number of (forced) process switches:                 {r['forced_process_switches']}",
            f"Number of processed I/O operations:                  {r['processed_io_operations']}",
            f"Average throughput (processes per time unit):        {r['throughput']:.6f}",
            "",
            f"Total CPU time spent processing:                     {r['cpu_busy_time']:.0f}"
            f" ({r['cpu_utilization']:.2%})",
            f"Total CPU time spent waiting:                        {r['cpu_idle_time']:.0f}"
            f" ({idle_fraction:.2%})",
            f"Average memory utilization:                          {r['memory_utilization']:.2%}",
            f"I/O device utilization:                              {r['io_utilization']:.2%}",
            "",
            f"Largest occurring memory queue length:               {r['max_memory_queue_length']}",
            f"Average memory queue length:                         {r['mean_memory_queue_length']:.3f}",
            f"Largest occurring cpu queue length:                  {r['max_cpu_queue_length']}",
            f"Average cpu queue length:                            {r['mean_cpu_queue_length']:.3f}",
            f"Largest occurring I/O queue length:                  {r['max_io_queue_length']}",
            f"Average I/O queue length:                            {r['mean_io_queue_length']:.3f}",
        ]

        if r['completed_processes'] > 0:
            summary += [
                "",
                f"Average # of times a process has been placed in memory queue: {r['mean_times_in_memory_queue']:.0f}",
                f"Average # of times a process has been placed in cpu queue:    {r['mean_times_in_cpu_queue']:.3f}",
                f"Average # of times a process has been placed in I/O queue:    {r['mean_times_in_io_queue']:.3f}",
                "",
                f"Average time spent in system per process:            {r['mean_time_in_system']:.1f}",
                f"Average time spent waiting for memory per process:   {r['mean_time_waiting_for_memory']:.1f}",
                f"Average time spent waiting for cpu per process:      {r['mean_time_waiting_for_cpu']:.1f}",
                f"Average time spent processing per process:           {r['mean_time_processing']:.1f}",
                f"Average time spent waiting for I/O per process:      {r['mean_time_waiting_for_io']:.1f}",
                f"Average time spent in I/O per process:               {r['mean_time_in_io']:.1f}",
            ]

        return "\n".join(summary)
