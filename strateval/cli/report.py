"""CLI report — prints strategy results to the console."""

from strateval.strategy.models import ResultSummary, Signal

_TITLES = {
    "rsi": "RSI Strategy",
    "macd": "MACD Strategy",
    "bollinger": "Bollinger Bands Strategy",
}


def format_signals(signals) -> str:
    """Render a signal timeline as one character per bar (``B``/``S``/``.``)."""
    marks = {int(Signal.BUY): "B", int(Signal.SELL): "S"}
    return "".join(marks.get(int(s), ".") for s in signals)


def print_summary(summary: ResultSummary) -> str:
    """Format and print one strategy's result.

    Returns:
        The formatted string (also printed to stdout).
    """
    title = _TITLES.get(summary.strategy, summary.strategy)
    open_str = (
        f"{summary.open_position:.5f}" if summary.open_position is not None else "none"
    )

    lines = [
        f"──────────────── {title} ────────────────",
        f"  Trades:          {summary.total_trades}",
        f"  Success:         {summary.success_rate:.2f}%",
        f"  Avg Return:      {summary.avg_return:.2f}%",
        f"  Open Position:   {open_str}",
        f"  Signals:         {format_signals(summary.signal_positions)}",
    ]
    output = "\n".join(lines)
    print(output)
    return output
