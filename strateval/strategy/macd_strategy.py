"""MACD crossover strategy.

Buys on a bullish crossover (MACD moves from below to above its signal
line) and sells on the opposite bearish crossover.  Both lines must be
defined on the previous bar, so scanning starts one bar after the first
MACD value.
"""

from dataclasses import dataclass

from strateval.strategy.base import run_signal_loop
from strateval.strategy.indicators import (
    calculate_macd,
    is_bearish_cross,
    is_bullish_cross,
)
from strateval.strategy.models import PriceInput, ResultSummary, extract_closes


@dataclass(frozen=True)
class MACDStrategy:
    """Implements ``StrategyProtocol``."""

    name: str = "macd"
    fast: int = 12
    slow: int = 26
    signal: int = 9

    def __post_init__(self) -> None:
        if min(self.fast, self.slow, self.signal) < 1:
            raise ValueError(
                f"MACD periods must be at least 1, got "
                f"fast={self.fast} slow={self.slow} signal={self.signal}"
            )
        if self.fast >= self.slow:
            raise ValueError(
                f"MACD fast period ({self.fast}) must be below slow period ({self.slow})"
            )

    @property
    def warmup(self) -> int:
        return self.slow + 1

    def evaluate(self, candles: PriceInput, profit_threshold: float) -> ResultSummary:
        closes = extract_closes(candles)
        series = calculate_macd(closes, self.fast, self.slow, self.signal)

        def _crossed(i: int, rule) -> bool:
            prev = series.value_at(i - 1)
            cur = series.value_at(i)
            if prev is None or cur is None:
                return False
            return rule(prev[0], prev[1], cur[0], cur[1])

        return run_signal_loop(
            self.name,
            closes,
            self.warmup,
            should_enter=lambda i: _crossed(i, is_bullish_cross),
            should_exit=lambda i: _crossed(i, is_bearish_cross),
            profit_threshold=profit_threshold,
        )


def run_macd_strategy(candles: PriceInput, profit_threshold: float) -> ResultSummary:
    """Evaluate MACD(12, 26, 9) crossovers."""
    return MACDStrategy().evaluate(candles, profit_threshold)
