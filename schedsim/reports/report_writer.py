# schedsim/reports/report_writer.py
"""
Write the final simulation report as text, JSON or YAML.
"""
from pathlib import Path
from typing import Dict, Any

from ..utils.io import save_json, save_yaml


def format_report(results: Dict[str, Any]) -> str:
    """Render the headline numbers of a results dictionary."""
    lines = [
        "=== Simulation Results ===",
        f"Simulated time:        {results['simulation_time']}",
        f"Created processes:     {results['created_processes']}",
        f"Completed processes:   {results['completed_processes']}",
        f"Throughput:            {results['throughput']:.6f} processes/time unit",
        f"CPU utilization:       {results['cpu_utilization']:.2%}",
        f"Memory utilization:    {results['memory_utilization']:.2%}",
        f"I/O utilization:       {results['io_utilization']:.2%}",
        f"Memory queue (avg/max): {results['mean_memory_queue_length']:.3f} / {results['max_memory_queue_length']}",
        f"CPU queue (avg/max):    {results['mean_cpu_queue_length']:.3f} / {results['max_cpu_queue_length']}",
        f"I/O queue (avg/max):    {results['mean_io_queue_length']:.3f} / {results['max_io_queue_length']}",
    ]
    return "\n".join(lines)


def write_report(results: Dict[str, Any], out_dir: str, format: str = 'yaml') -> Path:
    """
    Save results to ``out_dir`` and return the path of the main file.

    Args:
        results: Results dictionary from Simulator.run
        out_dir: Output directory
        format: 'yaml', 'json' or 'both'

    Returns:
        Path to the YAML file, or the JSON file when only JSON is written
    """
    if format not in ('yaml', 'json', 'both'):
        raise ValueError(f"Unknown report format: {format}")

    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)

    main_path = None
    if format in ('json', 'both'):
        main_path = out_path / "results.json"
        save_json(results, str(main_path))
    if format in ('yaml', 'both'):
        main_path = out_path / "results.yaml"
        save_yaml(results, str(main_path))

    (out_path / "summary.txt").write_text(format_report(results) + "\n")
    return main_path
