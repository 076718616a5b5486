"""
CLI entry point for prize judge.

Parses arguments, validates config, and wires components.
"""

import argparse
import sys
from argparse import Namespace
from pathlib import Path
from typing import TypedDict

from prettytable import PrettyTable

from .exceptions import ConfigurationError
from .fetchers.jsonl_fetcher import JSONLContestantFetcher, JSONLPrizeFetcher
from .logging_config import get_logger, setup_logging
from .models import Winner
from .orchestrator import Orchestrator, RunConfig
from .storage.jsonl_storage import JSONLWinnerStorage


class CLIArgs(TypedDict):
    """Typed representation of parsed CLI arguments."""
    prizes: str
    contestants: str
    output_dir: str
    progress_every: int
    debug: bool
    log_level: str


def parse_args(argv: list[str] | None = None) -> Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Prize Judge - pick one winner per prize from contestant observations"
    )

    # Required arguments
    _ = parser.add_argument(
        "--prizes",
        required=True,
        help="Path to prizes JSONL file (prize_id, unlocked_date)"
    )
    _ = parser.add_argument(
        "--contestants",
        required=True,
        help="Path to contestants JSONL file (contestant_id, participation_date)"
    )
    _ = parser.add_argument(
        "--output-dir",
        required=True,
        help="Directory for winners.jsonl and log files"
    )

    # Optional arguments
    _ = parser.add_argument(
        "--progress-every",
        type=int,
        default=1000,
        help="Log progress every N contestants (default: 1000)"
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set logging level (default: INFO)"
    )

    return parser.parse_args(argv)


def args_to_typed(ns: Namespace) -> CLIArgs:
    """Convert argparse Namespace to typed CLIArgs."""
    return CLIArgs(
        prizes=ns.prizes,
        contestants=ns.contestants,
        output_dir=ns.output_dir,
        progress_every=ns.progress_every,
        debug=ns.debug,
        log_level=ns.log_level,
    )


def validate_config(args: CLIArgs) -> None:
    """Validate configuration parameters."""
    logger = get_logger("validate_config")

    if args["progress_every"] <= 0:
        raise ConfigurationError(f"progress_every must be positive, got {args['progress_every']}")

    for option in ("prizes", "contestants"):
        path = Path(args[option])
        if not path.is_file():
            raise ConfigurationError(f"{option} file does not exist: {path}")
        logger.info(f"{option.capitalize()} file: {path}")

    # Ensure output directory exists
    output_dir = Path(args["output_dir"])
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Output directory: {output_dir}")


def wire_components(args: CLIArgs) -> Orchestrator:
    """Wire dependency injection components."""
    logger = get_logger("wire_components")

    logger.info("Creating fetchers")
    prize_fetcher = JSONLPrizeFetcher(Path(args["prizes"]))
    contestant_fetcher = JSONLContestantFetcher(Path(args["contestants"]))

    logger.info("Creating storage")
    storage = JSONLWinnerStorage(Path(args["output_dir"]) / "winners.jsonl")

    config = RunConfig(progress_every=args["progress_every"])

    return Orchestrator(
        prize_fetcher=prize_fetcher,
        contestant_fetcher=contestant_fetcher,
        storage=storage,
        config=config,
    )


def build_winners_table(winners: list[Winner]) -> PrettyTable:
    """Tabulate winners for terminal output."""
    table = PrettyTable()
    table.field_names = ["Prize", "Unlocked", "Winner", "Participated", "Elapsed"]
    table.align["Elapsed"] = "r"

    for winner in winners:
        table.add_row([
            winner.prize.prize_id,
            winner.prize.unlocked_date.isoformat(),
            winner.contestant.contestant_id,
            winner.contestant.participation_date.isoformat(),
            str(winner.elapsed),
        ])

    return table


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = args_to_typed(parse_args(argv))

    # Setup logging
    setup_logging(level=args["log_level"], debug=args["debug"], log_dir=Path(args["output_dir"]))
    logger = get_logger("main")

    try:
        logger.info("Starting Prize Judge")
        validate_config(args)

        orchestrator = wire_components(args)
        winners = orchestrator.run()
    except ConfigurationError as e:
        logger.error(str(e))
        print(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Judging interrupted by user")
        print("\nJudging interrupted by user")
        sys.exit(1)

    print("\nWinners:")
    print(build_winners_table(winners))

    won = {winner.prize.prize_id for winner in winners}
    unclaimed = [p.prize_id for p in orchestrator.prize_fetcher.list_prizes() if p.prize_id not in won]
    if unclaimed:
        print(f"\nNo winner for: {', '.join(unclaimed)}")

    print(f"\nConsidered {orchestrator.considered_contestants} contestants, "
          f"wrote {len(winners)} winners to {Path(args['output_dir']) / 'winners.jsonl'}")


if __name__ == "__main__":
    main()
