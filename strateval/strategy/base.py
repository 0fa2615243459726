"""Strategy protocol and the shared bar-by-bar evaluation loop.

Every strategy reduces to a warm-up offset plus two per-bar predicates
(enter, exit).  ``run_signal_loop`` drives them through a
``PositionTracker`` and hands the outcome to the stats module.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol, runtime_checkable

from strateval.backtest.stats import calculate_stats
from strateval.strategy.models import PriceInput, ResultSummary
from strateval.strategy.position import PositionTracker

logger = logging.getLogger("strateval.strategy")

BarRule = Callable[[int], bool]


@runtime_checkable
class StrategyProtocol(Protocol):
    """Interface that all evaluated strategies must satisfy."""

    name: str

    @property
    def warmup(self) -> int:
        """Index of the first bar the strategy scans."""
        ...

    def evaluate(self, candles: PriceInput, profit_threshold: float) -> ResultSummary:
        """Evaluate the strategy over *candles* and summarise its trades."""
        ...


def run_signal_loop(
    name: str,
    closes: list[float],
    start: int,
    should_enter: BarRule,
    should_exit: BarRule,
    profit_threshold: float,
) -> ResultSummary:
    """Scan bars ``start .. N-1`` in order and summarise the round trips.

    While Flat only *should_enter* is consulted; while Long only
    *should_exit*.  A position still open after the last bar is not
    closed and is excluded from the statistics.
    """
    tracker = PositionTracker(len(closes))

    for i in range(start, len(closes)):
        if not tracker.is_long:
            if should_enter(i):
                tracker.enter(i, closes[i])
        elif should_exit(i):
            tracker.exit(i, closes[i])

    if tracker.is_long:
        logger.debug(
            "%s: position opened at %.5f left unrealised at series end",
            name, tracker.entry_price,
        )

    return calculate_stats(
        name,
        tracker.trades,
        tracker.signals,
        profit_threshold,
        open_position=tracker.entry_price,
    )
