"""StratEval — application configuration.

Loads .env variables into a typed config object.
Every variable is optional; malformed values fail on load.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Typed configuration loaded from environment variables."""

    profit_threshold: float  # fraction, e.g. 0.01 for 1 %
    rsi_period: int
    rsi_oversold: float
    rsi_overbought: float
    macd_fast: int
    macd_slow: int
    macd_signal: int
    bb_period: int
    bb_std_dev: float
    strict: bool
    log_level: str

    def strategy_params(self, name: str) -> dict:
        """Return constructor kwargs for the registered strategy *name*."""
        if name == "rsi":
            return {
                "period": self.rsi_period,
                "oversold": self.rsi_oversold,
                "overbought": self.rsi_overbought,
            }
        if name == "macd":
            return {
                "fast": self.macd_fast,
                "slow": self.macd_slow,
                "signal": self.macd_signal,
            }
        if name == "bollinger":
            return {"period": self.bb_period, "num_std": self.bb_std_dev}
        return {}


def _env(name: str, default: str, cast):
    raw = os.environ.get(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(
            f"Invalid value for environment variable {name}: {raw!r}"
        ) from None


def check_threshold(value: float) -> float:
    """Return *value* if it is a usable profitability threshold.

    Raises ``ValueError`` for a negative threshold.
    """
    if value < 0:
        raise ValueError(f"PROFIT_THRESHOLD must be non-negative, got {value}")
    return value


def load_config(env_path: str | None = None) -> Config:
    """Load configuration from environment variables.

    Raises ``ValueError`` naming the variable when a value cannot be
    parsed or is out of range.
    """
    load_dotenv(dotenv_path=env_path)

    config = Config(
        profit_threshold=_env("PROFIT_THRESHOLD", "0.01", float),
        rsi_period=_env("RSI_PERIOD", "14", int),
        rsi_oversold=_env("RSI_OVERSOLD", "30", float),
        rsi_overbought=_env("RSI_OVERBOUGHT", "70", float),
        macd_fast=_env("MACD_FAST", "12", int),
        macd_slow=_env("MACD_SLOW", "26", int),
        macd_signal=_env("MACD_SIGNAL", "9", int),
        bb_period=_env("BB_PERIOD", "20", int),
        bb_std_dev=_env("BB_STD_DEV", "2.0", float),
        strict=os.environ.get("STRICT_INPUT", "false").strip().lower() in _TRUE_VALUES,
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )

    for var, value in [
        ("RSI_PERIOD", config.rsi_period),
        ("MACD_FAST", config.macd_fast),
        ("MACD_SLOW", config.macd_slow),
        ("MACD_SIGNAL", config.macd_signal),
        ("BB_PERIOD", config.bb_period),
    ]:
        if value < 1:
            raise ValueError(f"{var} must be at least 1, got {value}")

    check_threshold(config.profit_threshold)
    if config.bb_std_dev < 0:
        raise ValueError(f"BB_STD_DEV must be non-negative, got {config.bb_std_dev}")
    if config.macd_fast >= config.macd_slow:
        raise ValueError(
            f"MACD_FAST ({config.macd_fast}) must be below MACD_SLOW ({config.macd_slow})"
        )
    return config
