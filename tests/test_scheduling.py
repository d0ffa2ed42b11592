"""Tests for the memory, CPU and I/O managers."""

import math
import unittest

from schedsim.core.event_queue import EventType
from schedsim.core.statistics import Statistics
from schedsim.scheduling.process import Process, ProcessLocation, SimulationStateError
from schedsim.scheduling.memory import Memory
from schedsim.scheduling.cpu import Cpu
from schedsim.scheduling.io_device import Io
from schedsim.workload.duration_generator import ConstantDurationGenerator


def make_process(process_id=1, memory=10, cpu=10, io=math.inf,
                 location=ProcessLocation.MEMORY_QUEUE, created=0):
    """Build a process already sitting at ``location``."""
    return Process(
        process_id=process_id,
        memory_needed=memory,
        cpu_time_needed=cpu,
        avg_io_interval=io,
        time_to_next_io=io,
        creation_time=created,
        location=location,
    )


class TestMemory(unittest.TestCase):
    """Test cases for Memory admission."""

    def setUp(self):
        """Set up test fixtures."""
        self.statistics = Statistics(100)
        self.memory = Memory(100, self.statistics)

    def test_admits_in_arrival_order(self):
        """Test processes are admitted from the head while they fit."""
        p1 = make_process(1, memory=40, location=ProcessLocation.NEW)
        p2 = make_process(2, memory=40, location=ProcessLocation.NEW)
        p3 = make_process(3, memory=40, location=ProcessLocation.NEW)
        for p in (p1, p2, p3):
            self.memory.insert_process(p)

        self.assertIs(self.memory.check_memory(0), p1)
        self.assertIs(self.memory.check_memory(0), p2)
        self.assertIsNone(self.memory.check_memory(0))
        self.assertEqual(self.memory.allocated, 80)
        self.assertEqual(self.memory.queue, (p3,))

    def test_release_admits_waiting_process(self):
        """Test freed memory lets the blocked head in."""
        p1 = make_process(1, memory=60, location=ProcessLocation.NEW)
        p2 = make_process(2, memory=60, location=ProcessLocation.NEW)
        self.memory.insert_process(p1)
        self.memory.insert_process(p2)
        self.memory.check_memory(0)
        self.assertIsNone(self.memory.check_memory(0))

        self.memory.process_completed(p1)
        self.assertIs(self.memory.check_memory(5), p2)
        self.assertEqual(p2.time_spent_in_memory_queue, 5)

    def test_oversized_process_is_parked(self):
        """Test a process larger than memory never gets admitted."""
        big = make_process(1, memory=150, location=ProcessLocation.NEW)
        self.memory.insert_process(big)

        for _ in range(5):
            self.assertIsNone(self.memory.check_memory(10))
        self.assertEqual(self.memory.queue, (big,))
        self.assertEqual(self.memory.allocated, 0)

    def test_no_skip_ahead(self):
        """Test a small process behind a blocked head waits too."""
        big = make_process(1, memory=150, location=ProcessLocation.NEW)
        small = make_process(2, memory=10, location=ProcessLocation.NEW)
        self.memory.insert_process(big)
        self.memory.insert_process(small)

        self.assertIsNone(self.memory.check_memory(0))
        self.assertEqual(self.memory.queue, (big, small))

    def test_empty_queue(self):
        """Test checking an empty wait queue."""
        self.assertIsNone(self.memory.check_memory(0))

    def test_double_insert_rejected(self):
        """Test a process already in the queue cannot be inserted again."""
        p = make_process(1, location=ProcessLocation.NEW)
        self.memory.insert_process(p)
        with self.assertRaises(SimulationStateError):
            self.memory.insert_process(p)

    def test_release_unallocated_memory(self):
        """Test releasing memory that was never reserved."""
        with self.assertRaises(SimulationStateError):
            self.memory.process_completed(make_process(1, memory=10))

    def test_time_passed(self):
        """Test queue length and memory usage accounting."""
        p1 = make_process(1, memory=30, location=ProcessLocation.NEW)
        p2 = make_process(2, memory=150, location=ProcessLocation.NEW)
        self.memory.insert_process(p1)
        self.memory.insert_process(p2)
        self.memory.check_memory(0)

        self.memory.time_passed(10)

        self.assertEqual(self.statistics.memory_queue_length_time, 10)
        self.assertEqual(self.statistics.memory_queue_largest_length, 1)
        self.assertEqual(self.statistics.memory_usage_time, 300)

    def test_invalid_size(self):
        """Test non-positive capacity is rejected."""
        with self.assertRaises(ValueError):
            Memory(0, self.statistics)


class TestCpu(unittest.TestCase):
    """Test cases for the Round-Robin CPU."""

    def setUp(self):
        """Set up test fixtures."""
        self.statistics = Statistics()
        self.cpu = Cpu(4, self.statistics)

    def test_quantum_slices_until_completion(self):
        """Test a 10-unit job under quantum 4 with no I/O."""
        p = make_process(1, cpu=10)

        event = self.cpu.insert_process(p, 0)
        self.assertEqual((event.event_type, event.time), (EventType.SWITCH_PROCESS, 4))

        event = self.cpu.switch_process(4)
        self.assertEqual((event.event_type, event.time), (EventType.SWITCH_PROCESS, 8))

        event = self.cpu.switch_process(8)
        self.assertEqual((event.event_type, event.time), (EventType.END_PROCESS, 10))

        self.assertIs(self.cpu.active_process, p)
        self.assertEqual(p.cpu_time_needed, 2)
        self.assertEqual(self.statistics.nof_forced_process_switches, 0)

    def test_cpu_equal_to_quantum_switches(self):
        """Test remaining CPU equal to the quantum ends with a switch."""
        event = self.cpu.insert_process(make_process(1, cpu=4, io=10), 0)

        self.assertEqual(event.event_type, EventType.SWITCH_PROCESS)
        self.assertEqual(event.time, 4)

    def test_io_equal_to_quantum_switches(self):
        """Test an I/O need exactly at the quantum ends with a switch."""
        event = self.cpu.insert_process(make_process(1, cpu=10, io=4), 0)

        self.assertEqual(event.event_type, EventType.SWITCH_PROCESS)
        self.assertEqual(event.time, 4)

    def test_cpu_equal_to_io_requests_io(self):
        """Test equal CPU and I/O needs inside the quantum yield an I/O request."""
        event = self.cpu.insert_process(make_process(1, cpu=2, io=2), 0)

        self.assertEqual(event.event_type, EventType.IO_REQUEST)
        self.assertEqual(event.time, 2)

    def test_finishes_before_io(self):
        """Test a short job ends before its I/O need."""
        event = self.cpu.insert_process(make_process(1, cpu=3, io=3.5), 10)

        self.assertEqual(event.event_type, EventType.END_PROCESS)
        self.assertEqual(event.time, 13)

    def test_io_before_quantum(self):
        """Test an I/O need inside the quantum."""
        event = self.cpu.insert_process(make_process(1, cpu=100, io=1), 0)

        self.assertEqual(event.event_type, EventType.IO_REQUEST)
        self.assertEqual(event.time, 1)

    def test_preempted_process_goes_to_back(self):
        """Test quantum expiry requeues the active process at the back."""
        p1, p2, p3 = (make_process(i, cpu=100) for i in (1, 2, 3))
        self.assertIsNotNone(self.cpu.insert_process(p1, 0))
        self.assertIsNone(self.cpu.insert_process(p2, 0))
        self.assertIsNone(self.cpu.insert_process(p3, 0))

        self.cpu.switch_process(4)

        self.assertIs(self.cpu.active_process, p2)
        self.assertEqual(self.cpu.queue, (p3, p1))
        self.assertEqual(p1.location, ProcessLocation.READY_QUEUE)
        self.assertEqual(p1.cpu_time_needed, 96)
        self.assertEqual(p3.time_spent_in_ready_queue, 0)
        self.assertEqual(p2.time_spent_in_ready_queue, 4)
        self.assertEqual(self.statistics.nof_forced_process_switches, 1)

    def test_switch_when_idle(self):
        """Test switching with nothing to run."""
        self.assertIsNone(self.cpu.switch_process(0))
        self.assertTrue(self.cpu.is_idle())

    def test_active_process_left(self):
        """Test the next ready process is switched in."""
        p1 = make_process(1, cpu=100)
        p2 = make_process(2, cpu=2)
        self.cpu.insert_process(p1, 0)
        self.cpu.insert_process(p2, 0)
        p1.relocate(ProcessLocation.TERMINATED, allowed=(ProcessLocation.CPU,))

        event = self.cpu.active_process_left(3)

        self.assertIs(self.cpu.active_process, p2)
        self.assertEqual((event.event_type, event.time), (EventType.END_PROCESS, 5))

    def test_active_process_left_when_idle(self):
        """Test removing from an idle CPU is an error."""
        with self.assertRaises(SimulationStateError):
            self.cpu.active_process_left(0)

    def test_time_passed(self):
        """Test busy time counts only while a process runs."""
        self.cpu.time_passed(5)
        self.assertEqual(self.statistics.total_busy_cpu_time, 0)

        self.cpu.insert_process(make_process(1, cpu=100), 5)
        self.cpu.insert_process(make_process(2, cpu=100), 5)
        self.cpu.time_passed(3)

        self.assertEqual(self.statistics.total_busy_cpu_time, 3)
        self.assertEqual(self.statistics.cpu_queue_length_time, 3)
        self.assertEqual(self.statistics.cpu_queue_largest_length, 1)

    def test_invalid_quantum(self):
        """Test non-positive quantum is rejected."""
        with self.assertRaises(ValueError):
            Cpu(0, self.statistics)


class TestIo(unittest.TestCase):
    """Test cases for the I/O device."""

    def setUp(self):
        """Set up test fixtures."""
        self.statistics = Statistics()
        self.io = Io(3, self.statistics, ConstantDurationGenerator())

    def test_requests_are_served_in_order(self):
        """Test the second request waits for the device to free up."""
        p1 = make_process(1, cpu=50, io=7, location=ProcessLocation.CPU)
        p2 = make_process(2, cpu=50, io=7, location=ProcessLocation.CPU)

        event = self.io.add_io_request(p1, 5)
        self.assertEqual((event.event_type, event.time), (EventType.END_IO, 8))

        self.assertIsNone(self.io.add_io_request(p2, 6))
        self.assertEqual(self.io.queue, (p2,))

        self.assertIs(self.io.remove_active_process(8), p1)
        self.assertTrue(self.io.is_idle())

        event = self.io.start_io_operation(8)
        self.assertEqual((event.event_type, event.time), (EventType.END_IO, 11))
        self.assertIs(self.io.active_process, p2)
        self.assertEqual(p2.time_spent_waiting_for_io, 2)

    def test_finished_process_gets_new_io_interval(self):
        """Test leaving the device resets the time to the next I/O need."""
        p = make_process(1, cpu=50, io=7, location=ProcessLocation.CPU)
        p.time_to_next_io = 0
        self.io.add_io_request(p, 0)

        self.io.remove_active_process(3)

        self.assertEqual(p.time_to_next_io, 7)
        self.assertEqual(p.time_spent_in_io, 3)
        self.assertEqual(p.nof_times_in_io_queue, 1)

    def test_add_io_request_charges_cpu(self):
        """Test the requesting process is charged for its CPU slice."""
        p = make_process(1, cpu=50, io=7, location=ProcessLocation.CPU)
        self.io.add_io_request(p, 7)

        self.assertEqual(p.cpu_time_needed, 43)
        self.assertEqual(p.time_spent_in_cpu, 7)
        self.assertEqual(p.location, ProcessLocation.IO_DEVICE)

    def test_start_when_busy_or_empty(self):
        """Test no operation starts on a busy device or an empty queue."""
        self.assertIsNone(self.io.start_io_operation(0))

        self.io.add_io_request(make_process(1, location=ProcessLocation.CPU), 0)
        self.io.add_io_request(make_process(2, location=ProcessLocation.CPU), 0)
        self.assertIsNone(self.io.start_io_operation(1))

    def test_remove_from_idle_device(self):
        """Test removing from an idle device is an error."""
        with self.assertRaises(SimulationStateError):
            self.io.remove_active_process(0)

    def test_request_from_outside_cpu(self):
        """Test only the running process can request I/O."""
        with self.assertRaises(SimulationStateError):
            self.io.add_io_request(make_process(1, location=ProcessLocation.READY_QUEUE), 0)

    def test_time_passed(self):
        """Test queue length tracking."""
        self.io.add_io_request(make_process(1, location=ProcessLocation.CPU), 0)
        self.io.add_io_request(make_process(2, location=ProcessLocation.CPU), 0)
        self.io.add_io_request(make_process(3, location=ProcessLocation.CPU), 0)

        self.io.time_passed(2)

        self.assertEqual(self.statistics.io_queue_largest_length, 2)
        self.assertEqual(self.statistics.io_queue_length_time, 4)
        self.assertEqual(self.statistics.total_busy_io_time, 2)


if __name__ == '__main__':
    unittest.main()
