"""Strategy data models — typed representations for evaluation inputs and outputs."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence, Union


class InvalidInputError(ValueError):
    """Price series is empty, malformed, or too short to evaluate."""


@dataclass(frozen=True)
class CandleData:
    """A single candlestick bar. Only ``close`` is consumed by the engine."""

    time: str
    open: float
    high: float
    low: float
    close: float
    volume: int = 0


class Signal(IntEnum):
    """Per-bar action marker, aligned by index with the price series."""

    SELL = -1
    NONE = 0
    BUY = 1


@dataclass(frozen=True)
class Trade:
    """A completed long round trip: one BUY closed by one SELL."""

    entry_index: int
    exit_index: int
    entry_price: float
    exit_price: float

    @property
    def ret(self) -> float:
        """Realised return as a fraction of the entry price."""
        return (self.exit_price - self.entry_price) / self.entry_price


@dataclass(frozen=True)
class ResultSummary:
    """Aggregate outcome of one strategy run over one price series."""

    strategy: str
    success_rate: float  # percent of trades with return above the threshold
    avg_return: float  # mean trade return, percent
    total_trades: int
    signal_positions: tuple[int, ...]
    trades: tuple[Trade, ...] = ()
    open_position: Optional[float] = None  # entry price left unrealised at series end

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy,
            "success_rate": self.success_rate,
            "avg_return": self.avg_return,
            "total_trades": self.total_trades,
            "signal_positions": list(self.signal_positions),
        }


PriceInput = Union[Sequence[CandleData], Sequence[float]]


def extract_closes(candles: PriceInput) -> list[float]:
    """Return the closing prices of *candles* as a list of floats.

    Accepts bar records exposing ``close`` or plain numbers.
    """
    return [float(getattr(c, "close", c)) for c in candles]
