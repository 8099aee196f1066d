#!/usr/bin/env python3
"""
String GA CLI - Minimal entry point.

This is the command-line interface for the string genetic search.
Configuration comes from a YAML file; any flag given on the command line
overrides the matching file value.

Usage:
    python3 ga_cli.py [run_config.yaml] [options]
    python3 ga_cli.py --list-presets
    python3 ga_cli.py --help

Examples:
    # Run with the packaged defaults
    python3 ga_cli.py

    # Evolve a custom goal with the largest population, reproducibly
    python3 ga_cli.py --goal "Hello World" --population 3 --seed 7
"""

import sys
import argparse
from pathlib import Path

# Add project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Evolve a string toward a goal with a genetic algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('config', nargs='?', default=None,
                        help='Run configuration YAML (default: packaged string_ga_config.yaml)')
    parser.add_argument('--goal', help='Goal string (lowercased before use)')
    parser.add_argument('--mutation', type=int, help='Mutation-rate preset index (0-3)')
    parser.add_argument('--population', type=int, help='Population-size preset index (0-3)')
    parser.add_argument('--generation-cap', dest='generation_cap', type=int,
                        help='Generation-cap preset index (0-3)')
    parser.add_argument('--seed', dest='random_seed', type=int, help='Random seed')
    parser.add_argument('--history', action='store_true', default=None,
                        help='Print the per-generation history after the run')
    parser.add_argument('--list-presets', action='store_true',
                        help='Show the available presets and exit')
    return parser


def print_presets():
    """Print every preset table."""
    from string_ga.presets import describe_presets

    for setting, rows in describe_presets().items():
        print(f"{setting}:")
        for row in rows:
            print(f"  {row}")


def main(argv=None):
    """Main entry point for the string GA CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_presets:
        print_presets()
        return 0

    overrides = {
        'goal': args.goal,
        'mutation': args.mutation,
        'population': args.population,
        'generation_cap': args.generation_cap,
        'random_seed': args.random_seed,
        'history': args.history,
    }

    from string_ga.cli import run_from_config, ConfigValidationError

    try:
        run_from_config(args.config, overrides)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 1
    except (FileNotFoundError, ConfigValidationError, ValueError) as e:
        print(f"\nError: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
