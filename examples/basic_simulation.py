"""Basic simulation example."""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from schedsim.core.simulator import Simulator
from schedsim.utils.logger import setup_logger
from configs import load_config, merge_configs, DEFAULT_CONFIG_PATH


def main():
    """Run the default workload with a long and a short quantum."""
    logger = setup_logger("BasicSimulation")

    logger.info("=== Basic Round-Robin Scheduler Simulation ===")

    config = load_config(str(DEFAULT_CONFIG_PATH))

    results = {}
    for quantum in (500, 100):
        run_config = merge_configs(config, {'cpu': {'quantum': quantum}})
        logger.info(f"Running with quantum {quantum} for {run_config['simulation']['duration']} time units")

        results[quantum] = Simulator(run_config).run()

    logger.info("\n=== Quantum comparison ===")
    for quantum, result in results.items():
        logger.info(
            f"quantum={quantum}: completed={result['completed_processes']}, "
            f"switches={result['forced_process_switches']}, "
            f"cpu_util={result['cpu_utilization']:.2%}, "
            f"mean_time_in_system={result['mean_time_in_system']:.1f}"
        )


if __name__ == "__main__":
    main()
