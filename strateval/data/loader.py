"""Price series loading and validation.

Reads closing prices from CSV into ``CandleData`` bars.  Only the close
column is required; the other OHLCV fields fall back to the close.
"""

import logging
import math
from pathlib import Path
from typing import Sequence

import pandas as pd

from strateval.strategy.models import CandleData, InvalidInputError

logger = logging.getLogger("strateval.data")


def candles_from_closes(closes: Sequence[float]) -> list[CandleData]:
    """Wrap plain closing prices as bars, timestamped by position."""
    return [
        CandleData(time=str(i), open=c, high=c, low=c, close=c)
        for i, c in enumerate(float(x) for x in closes)
    ]


def load_candles_csv(
    path: str | Path,
    close_column: str = "close",
) -> list[CandleData]:
    """Load bars from a CSV file, oldest-first.

    Column names are matched case-insensitively.  Raises
    ``InvalidInputError`` when the file is empty or not parseable as CSV,
    the close column is missing, or a close is not a positive finite number.
    """
    try:
        df = pd.read_csv(path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise InvalidInputError(f"Cannot parse CSV {path}: {exc}") from exc
    df.columns = [str(c).strip().lower() for c in df.columns]
    close_key = close_column.lower()

    if close_key not in df.columns:
        raise InvalidInputError(
            f"CSV {path} has no '{close_column}' column "
            f"(found: {', '.join(df.columns)})"
        )

    closes = pd.to_numeric(df[close_key], errors="coerce")
    if closes.isna().any():
        bad = int(closes.isna().idxmax())
        raise InvalidInputError(f"Non-numeric close at row {bad} in {path}")

    def _col(name: str) -> pd.Series:
        if name in df.columns:
            return pd.to_numeric(df[name], errors="coerce").fillna(closes)
        return closes

    times = df["time"].astype(str) if "time" in df.columns else pd.Series(
        [str(i) for i in range(len(df))]
    )
    volume = (
        pd.to_numeric(df["volume"], errors="coerce").fillna(0).astype(int)
        if "volume" in df.columns
        else pd.Series([0] * len(df))
    )
    opens, highs, lows = _col("open"), _col("high"), _col("low")

    candles = [
        CandleData(
            time=times.iloc[i],
            open=float(opens.iloc[i]),
            high=float(highs.iloc[i]),
            low=float(lows.iloc[i]),
            close=float(closes.iloc[i]),
            volume=int(volume.iloc[i]),
        )
        for i in range(len(df))
    ]
    validate_series([c.close for c in candles])
    logger.info("Loaded %d bars from %s", len(candles), path)
    return candles


def validate_series(closes: Sequence[float], min_length: int = 1) -> None:
    """Reject a series the indicators cannot meaningfully consume.

    Raises ``InvalidInputError`` when *closes* is shorter than
    *min_length* (at least one bar) or holds a non-finite or
    non-positive price.
    """
    if len(closes) == 0:
        raise InvalidInputError("Price series is empty")
    if len(closes) < min_length:
        raise InvalidInputError(
            f"Need at least {min_length} bars, got {len(closes)}"
        )
    for i, c in enumerate(closes):
        if not math.isfinite(c) or c <= 0:
            raise InvalidInputError(f"Invalid close at index {i}: {c!r}")
