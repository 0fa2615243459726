"""RSI reversion strategy — buy oversold, sell overbought.

Enters long when RSI drops below *oversold* and exits when it rises above
*overbought*.
"""

from dataclasses import dataclass

from strateval.strategy.base import run_signal_loop
from strateval.strategy.indicators import calculate_rsi
from strateval.strategy.models import PriceInput, ResultSummary, extract_closes


@dataclass(frozen=True)
class RSIStrategy:
    """Implements ``StrategyProtocol``."""

    name: str = "rsi"
    period: int = 14
    oversold: float = 30.0
    overbought: float = 70.0

    def __post_init__(self) -> None:
        if self.period < 1:
            raise ValueError(f"RSI period must be at least 1, got {self.period}")

    @property
    def warmup(self) -> int:
        return self.period + 1

    def evaluate(self, candles: PriceInput, profit_threshold: float) -> ResultSummary:
        closes = extract_closes(candles)

        # Computed once per bar; enter and exit read the same value.
        rsi = {
            i: calculate_rsi(closes, i, self.period)
            for i in range(self.warmup, len(closes))
        }

        return run_signal_loop(
            self.name,
            closes,
            self.warmup,
            should_enter=lambda i: rsi[i] < self.oversold,
            should_exit=lambda i: rsi[i] > self.overbought,
            profit_threshold=profit_threshold,
        )


def run_rsi_strategy(candles: PriceInput, profit_threshold: float) -> ResultSummary:
    """Evaluate RSI(14) with 30/70 bounds."""
    return RSIStrategy().evaluate(candles, profit_threshold)
