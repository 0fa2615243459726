"""Backtest engine — evaluates every configured strategy over one price series.

Each strategy runs independently on the same immutable closes; nothing is
shared between runs, so results do not depend on evaluation order.
"""

import logging
from typing import Iterable, Optional

from strateval.config import Config
from strateval.data.loader import validate_series
from strateval.strategy.models import PriceInput, ResultSummary, extract_closes
from strateval.strategy.registry import STRATEGY_REGISTRY, get_strategy

logger = logging.getLogger("strateval.backtest")


class BacktestEngine:
    """Runs registered strategies against historical closes.

    Args:
        config: Application configuration (threshold, indicator periods).
    """

    def __init__(self, config: Config) -> None:
        self._config = config

    # ── Public API ───────────────────────────────────────────────────────

    def run(
        self,
        candles: PriceInput,
        strategies: Optional[Iterable[str]] = None,
    ) -> dict[str, ResultSummary]:
        """Execute every requested strategy over *candles*.

        Args:
            candles: Bars (or plain closes), oldest-first.
            strategies: Registry names to run; all registered when ``None``.

        Returns:
            Dict of strategy name → ``ResultSummary``, in request order.

        Raises ``KeyError`` for an unknown strategy name, and
        ``InvalidInputError`` in strict mode for empty, malformed or
        too-short input.
        """
        names = list(strategies) if strategies is not None else list(STRATEGY_REGISTRY)
        instances = [
            get_strategy(name, **self._config.strategy_params(name))
            for name in names
        ]
        closes = extract_closes(candles)

        if self._config.strict:
            min_length = max((s.warmup + 1 for s in instances), default=1)
            validate_series(closes, min_length)

        results: dict[str, ResultSummary] = {}
        for name, strategy in zip(names, instances):
            summary = strategy.evaluate(closes, self._config.profit_threshold)
            results[name] = summary
            logger.info(
                "%s: %d trades, success %.1f%%, avg return %.2f%%",
                name,
                summary.total_trades,
                summary.success_rate,
                summary.avg_return,
            )
        return results
