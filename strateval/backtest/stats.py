"""Backtest statistics — pure functions reducing closed trades to a summary."""

from typing import Optional, Sequence

from strateval.strategy.models import ResultSummary, Trade


def calculate_stats(
    strategy: str,
    trades: Sequence[Trade],
    signals: Sequence[int],
    profit_threshold: float,
    open_position: Optional[float] = None,
) -> ResultSummary:
    """Compute summary statistics for one strategy run.

    A trade counts as successful when its return is strictly greater than
    *profit_threshold* (a fraction, e.g. ``0.01`` for 1 %).

    Returns:
        ``ResultSummary`` with ``success_rate`` and ``avg_return`` as
        percentages.  Zero trades give ``0.0`` for both.
    """
    total = len(trades)
    if total == 0:
        return ResultSummary(
            strategy=strategy,
            success_rate=0.0,
            avg_return=0.0,
            total_trades=0,
            signal_positions=tuple(signals),
            trades=(),
            open_position=open_position,
        )

    returns = [t.ret for t in trades]
    profitable = sum(1 for r in returns if r > profit_threshold)
    total_ret = 0.0
    for r in returns:
        total_ret += r

    return ResultSummary(
        strategy=strategy,
        success_rate=profitable / total * 100,
        avg_return=(total_ret / total) * 100,
        total_trades=total,
        signal_positions=tuple(signals),
        trades=tuple(trades),
        open_position=open_position,
    )


def success_rate_at(trades: Sequence[Trade], profit_threshold: float) -> float:
    """Success rate (percent) of *trades* for an alternative threshold.

    Lets a caller sweep thresholds over one fixed trade set without
    re-running the strategy.
    """
    if not trades:
        return 0.0
    profitable = sum(1 for t in trades if t.ret > profit_threshold)
    return profitable / len(trades) * 100
