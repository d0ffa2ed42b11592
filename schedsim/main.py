"""Main entry point for the SchedSim scheduler simulator."""

import argparse
import sys

from schedsim.core.simulator import Simulator
from schedsim.core.sim_config import SimulationConfig
from schedsim.reports.report_writer import format_report, write_report
from schedsim.utils.logger import setup_logger
from configs import load_config, merge_configs, DEFAULT_CONFIG_PATH


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="SchedSim: Round-Robin OS Scheduler Simulator"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to configuration file",
    )
    parser.add_argument(
        "--override",
        type=str,
        default=None,
        help="Optional YAML file merged over the base configuration",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (overrides simulation.random_seed)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="results",
        help="Directory to save results",
    )
    parser.add_argument(
        "--format",
        choices=["yaml", "json", "both"],
        default="yaml",
        help="Results file format",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main function."""
    args = parse_args(argv)

    # Setup logging
    log_level = "DEBUG" if args.verbose else "INFO"
    logger = setup_logger("SchedSim", level=log_level)
    for component in ("Simulator", "Memory", "Cpu", "Io", "Statistics"):
        setup_logger(component, level=log_level)

    logger.info("=== SchedSim: Round-Robin OS Scheduler Simulator ===")
    logger.info(f"Loading configuration from {args.config}")

    try:
        config = load_config(args.config)
        if args.override:
            config = merge_configs(config, load_config(args.override))
        if args.seed is not None:
            config = merge_configs(config, {'simulation': {'random_seed': args.seed}})

        sim_config = SimulationConfig.from_dict(config)
        logger.info(f"Duration generator: {sim_config.generator}")

        simulator = Simulator(sim_config)
        results = simulator.run()

        logger.info("\n" + format_report(results))

        results_file = write_report(results, args.output_dir, args.format)
        logger.info(f"Results saved to {results_file}")

        logger.info("Simulation completed successfully!")
        return 0

    except Exception as e:
        logger.error(f"Simulation failed: {str(e)}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
