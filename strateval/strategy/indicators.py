"""Technical indicators — SMA, EMA, RSI, MACD, Bollinger Bands. Pure functions, no I/O.

Every function works on a plain list of closing prices. Short history never
raises: each indicator falls back to a neutral value instead.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


# ── Moving averages ──────────────────────────────────────────────────────


def sma(closes: list[float], end_index: int, period: int) -> float:
    """Simple moving average of the *period* closes ending at *end_index*.

    Returns the sentinel ``0.0`` when ``end_index < period - 1``.  The
    sentinel is not a price and must not be compared against one.
    """
    if end_index < period - 1:
        return 0.0
    window = closes[end_index - period + 1 : end_index + 1]
    return sum(window) / period


def ema_step(value: float, prev_ema: float, period: int) -> float:
    """Advance an EMA by one observation.

        ``EMA_today = value × k + EMA_yesterday × (1 - k)``
    where ``k = 2 / (period + 1)``.
    """
    k = 2.0 / (period + 1)
    return value * k + prev_ema * (1 - k)


def iter_ema(values: Iterable[float], period: int, seed: float) -> Iterator[float]:
    """Yield one EMA value per element of *values*, starting from *seed*.

    The previous EMA is carried between steps, so values must be fed in
    chronological order.
    """
    prev = seed
    for value in values:
        prev = ema_step(value, prev, period)
        yield prev


# ── RSI ──────────────────────────────────────────────────────────────────


def calculate_rsi(closes: list[float], index: int, period: int = 14) -> float:
    """Relative Strength Index at *index* over the trailing *period* deltas.

    Algorithm:
        1. delta = close[i] - close[i-1] for i in ``index-period+1 .. index``
        2. gain = sum of positive deltas, loss = sum of |negative deltas|
        3. RS = gain / loss, or ``0`` when loss is zero
        4. RSI = 100 - 100 / (1 + RS)

    Returns ``50.0`` when ``index < period``.

    Note: a window with no losses gives RS = 0 and therefore RSI = 0, even
    when every delta is a gain.  Kept as-is for compatibility with existing
    results; a strictly rising window is reported as oversold.
    """
    if index < period:
        return 50.0

    gain = 0.0
    loss = 0.0
    for i in range(index - period + 1, index + 1):
        change = closes[i] - closes[i - 1]
        if change > 0:
            gain += change
        else:
            loss -= change

    rs = 0.0 if loss == 0 else gain / loss
    return 100.0 - 100.0 / (1.0 + rs)


# ── MACD ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MACDSeries:
    """MACD and signal lines, aligned to bars ``offset .. offset + len - 1``."""

    offset: int
    macd: tuple[float, ...]
    signal: tuple[float, ...]

    def value_at(self, bar_index: int) -> Optional[tuple[float, float]]:
        """Return ``(macd, signal)`` at *bar_index*, or ``None`` if undefined."""
        j = bar_index - self.offset
        if j < 0 or j >= len(self.macd):
            return None
        return self.macd[j], self.signal[j]


def calculate_macd(
    closes: list[float],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> MACDSeries:
    """Calculate the MACD line and its signal line.

    The fast EMA is seeded with ``closes[fast - 1]`` and the slow EMA with
    ``closes[slow - 1]``.  Both are then recurred over bars ``slow .. N-1``,
    giving one MACD value per bar from index *slow* onward.  The signal
    line is an EMA(*signal*) of the MACD line seeded with its first value.

    Returns empty lines when there are no bars past *slow*, or when
    *fast* is so long that its seed bar lies past the end of *closes*.
    """
    if len(closes) <= max(fast, slow):
        return MACDSeries(offset=slow, macd=(), signal=())

    tail = closes[slow:]
    fast_ema = iter_ema(tail, fast, seed=closes[fast - 1])
    slow_ema = iter_ema(tail, slow, seed=closes[slow - 1])
    macd = [f - s for f, s in zip(fast_ema, slow_ema)]

    signal_line = [macd[0]]
    signal_line.extend(iter_ema(macd[1:], signal, seed=macd[0]))

    return MACDSeries(offset=slow, macd=tuple(macd), signal=tuple(signal_line))


def is_bullish_cross(prev_macd: float, prev_sig: float, macd: float, sig: float) -> bool:
    """MACD crossed above its signal line between two consecutive bars."""
    return prev_macd < prev_sig and macd > sig


def is_bearish_cross(prev_macd: float, prev_sig: float, macd: float, sig: float) -> bool:
    """MACD crossed below its signal line between two consecutive bars."""
    return prev_macd > prev_sig and macd < sig


# ── Bollinger Bands ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class BollingerBand:
    """Band values at a single bar."""

    upper: float
    middle: float
    lower: float


def calculate_bollinger(
    closes: list[float],
    index: int,
    period: int = 20,
    num_std: float = 2.0,
) -> BollingerBand:
    """Calculate Bollinger Bands at *index*.

    Middle = SMA(close, *period*)
    Upper  = middle + *num_std* × σ
    Lower  = middle − *num_std* × σ

    σ is the population standard deviation of the window around the SMA.
    Before warm-up all three values are the SMA sentinel ``0.0``.
    """
    middle = sma(closes, index, period)
    if index < period - 1:
        return BollingerBand(upper=middle, middle=middle, lower=middle)

    window = closes[index - period + 1 : index + 1]
    variance = sum((x - middle) ** 2 for x in window) / period
    sigma = math.sqrt(variance)

    return BollingerBand(
        upper=middle + num_std * sigma,
        middle=middle,
        lower=middle - num_std * sigma,
    )
