"""StratEval — command-line entry point.

Evaluates the RSI, MACD and Bollinger strategies over a CSV of closing
prices (or the built-in demo series) and prints a report per strategy.
"""

import argparse
import logging
import sys
from dataclasses import replace

from strateval.backtest.engine import BacktestEngine
from strateval.cli.report import print_summary
from strateval.config import check_threshold, load_config
from strateval.data.loader import candles_from_closes, load_candles_csv
from strateval.strategy.models import InvalidInputError
from strateval.strategy.registry import STRATEGY_REGISTRY

logger = logging.getLogger("strateval")

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

DEMO_CLOSES = [
    100, 101, 102, 98, 96, 94, 92, 93, 95, 97, 99, 101, 100, 102,
    103, 105, 104, 106, 107, 109, 110, 111, 113, 112, 114, 115, 117, 116,
]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="StratEval strategy evaluator")
    parser.add_argument("--csv", help="CSV file with a 'close' column (default: demo series)")
    parser.add_argument("--close-column", default="close", help="Name of the close column")
    parser.add_argument(
        "--threshold",
        type=float,
        help="Profitability threshold as a fraction (default: PROFIT_THRESHOLD or 0.01)",
    )
    parser.add_argument(
        "--strategy",
        action="append",
        choices=sorted(STRATEGY_REGISTRY),
        help="Strategy to run; repeat for several (default: all)",
    )
    parser.add_argument("--env", help="Path to a .env file")
    return parser


def run_cli(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, run the backtest and print the results."""
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.env)
        if args.threshold is not None:
            config = replace(
                config, profit_threshold=check_threshold(args.threshold),
            )
    except ValueError as exc:
        logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT)
        logger.error("Configuration error: %s", exc)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format=_LOG_FORMAT,
    )

    try:
        if args.csv:
            candles = load_candles_csv(args.csv, args.close_column)
        else:
            candles = candles_from_closes(DEMO_CLOSES)
        results = BacktestEngine(config).run(candles, args.strategy)
    except (InvalidInputError, OSError) as exc:
        logger.error("Input error: %s", exc)
        return 2

    for summary in results.values():
        print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
