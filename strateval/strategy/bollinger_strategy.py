"""Bollinger Band breakout strategy.

Buys when the close falls below the lower band and sells when it closes
above the upper band.
"""

from dataclasses import dataclass

from strateval.strategy.base import run_signal_loop
from strateval.strategy.indicators import calculate_bollinger
from strateval.strategy.models import PriceInput, ResultSummary, extract_closes


@dataclass(frozen=True)
class BollingerStrategy:
    """Implements ``StrategyProtocol``."""

    name: str = "bollinger"
    period: int = 20
    num_std: float = 2.0

    def __post_init__(self) -> None:
        if self.period < 1:
            raise ValueError(f"Bollinger period must be at least 1, got {self.period}")

    @property
    def warmup(self) -> int:
        return self.period

    def evaluate(self, candles: PriceInput, profit_threshold: float) -> ResultSummary:
        closes = extract_closes(candles)
        bands = {
            i: calculate_bollinger(closes, i, self.period, self.num_std)
            for i in range(self.warmup, len(closes))
        }

        return run_signal_loop(
            self.name,
            closes,
            self.warmup,
            should_enter=lambda i: closes[i] < bands[i].lower,
            should_exit=lambda i: closes[i] > bands[i].upper,
            profit_threshold=profit_threshold,
        )


def run_bollinger_strategy(candles: PriceInput, profit_threshold: float) -> ResultSummary:
    """Evaluate Bollinger(20, 2) breakouts."""
    return BollingerStrategy().evaluate(candles, profit_threshold)
