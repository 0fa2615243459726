"""Strategy registry — maps strategy names to classes.

Used by BacktestEngine and the CLI to instantiate strategies by name.
"""

from strateval.strategy.base import StrategyProtocol
from strateval.strategy.bollinger_strategy import BollingerStrategy
from strateval.strategy.macd_strategy import MACDStrategy
from strateval.strategy.rsi_strategy import RSIStrategy


STRATEGY_REGISTRY: dict[str, type] = {
    "rsi": RSIStrategy,
    "macd": MACDStrategy,
    "bollinger": BollingerStrategy,
}


def get_strategy(name: str, **params) -> StrategyProtocol:
    """Look up and instantiate a strategy by registry key.

    *params* are passed to the strategy constructor (periods, bounds).

    Raises ``KeyError`` if the strategy name is not registered.
    """
    if name not in STRATEGY_REGISTRY:
        raise KeyError(
            f"Unknown strategy '{name}'. "
            f"Available: {', '.join(STRATEGY_REGISTRY.keys())}"
        )
    return STRATEGY_REGISTRY[name](**params)
