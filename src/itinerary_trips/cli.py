"""Command line interface for printing trips from an itinerary file."""

import argparse
import sys

from itinerary_trips.adapters.config import AppConfig
from itinerary_trips.main import configure_logging, run


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="itinerary-trips",
        description="Group itinerary segments into trips and print them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Read ./input.txt
  itinerary-trips

  # Read another file and treat MAD as home
  itinerary-trips reservations.txt --base MAD

  # Show grouping decisions
  itinerary-trips --log-level DEBUG
        """,
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        help="Itinerary file (default: INPUT_FILE setting or ./input.txt)",
    )
    parser.add_argument("--base", help="Base location overriding the BASED line")
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument(
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Build the configuration, letting command line arguments take precedence."""
    overrides: dict[str, str] = {}
    if args.config:
        overrides["config_file"] = args.config
    if args.log_level:
        overrides["log_level"] = args.log_level
    config = AppConfig(**overrides).load_config_file()

    if args.input_file:
        config.input_file = args.input_file
    if args.base:
        config.base_override = args.base
    return config


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(config.log_level)
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
