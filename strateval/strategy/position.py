"""Single-position state machine — Flat or Long, pure bookkeeping, no I/O.

Owns the per-bar signal timeline and the list of closed trades for one
strategy run.  Entries are ignored while Long and exits ignored while Flat,
so a run can never hold two overlapping positions.
"""

import logging
from typing import Optional

from strateval.strategy.models import Signal, Trade

logger = logging.getLogger("strateval.strategy")


class PositionTracker:
    """Tracks one long position across a price series.

    Args:
        n_bars: Length of the series; sizes the signal timeline.
    """

    def __init__(self, n_bars: int) -> None:
        self._signals: list[int] = [int(Signal.NONE)] * n_bars
        self._trades: list[Trade] = []
        self._entry_price: Optional[float] = None
        self._entry_index: Optional[int] = None

    # ── Transitions ──────────────────────────────────────────────────────

    def enter(self, index: int, price: float) -> bool:
        """Open a long at *price* on bar *index*.

        Returns ``False`` (and does nothing) when already Long.
        """
        if self.is_long:
            return False
        self._entry_price = price
        self._entry_index = index
        self._signals[index] = int(Signal.BUY)
        return True

    def exit(self, index: int, price: float) -> Optional[Trade]:
        """Close the open long at *price* on bar *index*.

        Returns the completed ``Trade``, or ``None`` when Flat.
        """
        if not self.is_long:
            return None
        trade = Trade(
            entry_index=self._entry_index,
            exit_index=index,
            entry_price=self._entry_price,
            exit_price=price,
        )
        self._trades.append(trade)
        self._signals[index] = int(Signal.SELL)
        self._entry_price = None
        self._entry_index = None
        logger.debug(
            "Closed trade %d→%d: %.5f → %.5f (%.4f)",
            trade.entry_index, trade.exit_index,
            trade.entry_price, trade.exit_price, trade.ret,
        )
        return trade

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_long(self) -> bool:
        """``True`` while a position is open."""
        return self._entry_price is not None

    @property
    def entry_price(self) -> Optional[float]:
        """Entry price of the open position, ``None`` when Flat."""
        return self._entry_price

    @property
    def trades(self) -> list[Trade]:
        """Closed trades in the order they were realised."""
        return list(self._trades)

    @property
    def signals(self) -> list[int]:
        """Per-bar BUY/SELL/NONE markers."""
        return list(self._signals)
