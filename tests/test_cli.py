"""Tests for the command-line driver and console report."""

import pytest

from strateval.cli.report import format_signals, print_summary
from strateval.main import run_cli
from strateval.strategy.models import ResultSummary


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ["PROFIT_THRESHOLD", "STRICT_INPUT", "LOG_LEVEL", "BB_PERIOD"]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env_args(tmp_path):
    return ["--env", str(tmp_path / "nonexistent.env")]


class TestReport:

    def test_format_signals(self):
        assert format_signals([0, 1, 0, -1]) == ".B.S"

    def test_print_summary(self, capsys):
        summary = ResultSummary(
            strategy="bollinger",
            success_rate=50.0,
            avg_return=12.345,
            total_trades=2,
            signal_positions=(1, -1, 0),
            open_position=None,
        )
        output = print_summary(summary)
        assert "Bollinger Bands Strategy" in output
        assert "Trades:          2" in output
        assert "Success:         50.00%" in output
        assert "Avg Return:      12.35%" in output
        assert "Signals:         BS." in output
        assert capsys.readouterr().out.strip() == output.strip()


class TestRunCli:

    def test_demo_run(self, capsys, env_args):
        assert run_cli(env_args) == 0
        out = capsys.readouterr().out
        assert "RSI Strategy" in out
        assert "MACD Strategy" in out
        assert "Bollinger Bands Strategy" in out

    def test_single_strategy_from_csv(self, tmp_path, capsys, env_args):
        path = tmp_path / "bars.csv"
        closes = [100.0] * 20 + [90.0, 120.0]
        path.write_text("close\n" + "\n".join(str(c) for c in closes) + "\n")
        code = run_cli(env_args + ["--csv", str(path), "--strategy", "bollinger"])
        assert code == 0
        out = capsys.readouterr().out
        assert "Trades:          1" in out
        assert "RSI Strategy" not in out

    def test_threshold_flag(self, tmp_path, capsys, env_args):
        path = tmp_path / "bars.csv"
        closes = [100.0] * 20 + [90.0, 120.0]
        path.write_text("close\n" + "\n".join(str(c) for c in closes) + "\n")
        run_cli(env_args + ["--csv", str(path), "--strategy", "bollinger", "--threshold", "0.5"])
        assert "Success:         0.00%" in capsys.readouterr().out

    def test_missing_csv(self, tmp_path, env_args):
        assert run_cli(env_args + ["--csv", str(tmp_path / "none.csv")]) == 2

    def test_empty_csv(self, tmp_path, capsys, env_args):
        path = tmp_path / "empty.csv"
        path.write_text("")
        assert run_cli(env_args + ["--csv", str(path)]) == 2
        assert "Strategy" not in capsys.readouterr().out

    def test_negative_threshold_flag(self, capsys, env_args):
        assert run_cli(env_args + ["--threshold", "-0.2"]) == 2
        assert "Strategy" not in capsys.readouterr().out

    def test_bad_config(self, monkeypatch, env_args):
        monkeypatch.setenv("PROFIT_THRESHOLD", "lots")
        assert run_cli(env_args) == 2

    def test_log_format_same_on_error(self, monkeypatch, env_args):
        calls = []
        monkeypatch.setattr(
            "strateval.main.logging.basicConfig", lambda **kw: calls.append(kw),
        )
        monkeypatch.setenv("PROFIT_THRESHOLD", "lots")
        run_cli(env_args)
        monkeypatch.delenv("PROFIT_THRESHOLD")
        run_cli(env_args + ["--strategy", "rsi"])
        assert len(calls) == 2
        assert calls[0]["format"] == calls[1]["format"]
        assert "%(name)s" in calls[0]["format"]
