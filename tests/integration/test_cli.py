"""CLI runs against the offline example client."""

import io
from unittest.mock import MagicMock, patch

import pytest

from txdoctor.cli.commands import run
from txdoctor.config.settings import Settings
from txdoctor.diagnosis.diagnoser import Diagnoser
from txdoctor.diagnosis.exceptions import DiagnosisError


def _run(argv: list[str], settings: Settings, diagnoser=None) -> tuple[int, str]:
    out = io.StringIO()
    code = run(argv, settings, diagnoser=diagnoser, out=out)
    return code, out.getvalue()


class TestHelp:
    def test_no_arguments_prints_help(self, settings: Settings) -> None:
        code, output = _run([], settings)
        assert code == 0
        assert "--demo" in output
        assert "--batch" in output

    def test_unknown_demo_exits(self, settings: Settings) -> None:
        with pytest.raises(SystemExit):
            _run(["--demo", "nope"], settings)


class TestDemo:
    def test_single_demo_prints_report(self, settings: Settings, example_diagnoser: Diagnoser) -> None:
        code, output = _run(["--demo", "paused"], settings, example_diagnoser)
        assert code == 0
        assert "Network: Arbitrum" in output
        assert "Error Category: Execution Revert" in output
        assert "(3 AI conversation turns)" in output

    def test_all_demos(self, settings: Settings, example_diagnoser: Diagnoser) -> None:
        code, output = _run(["--demo", "all"], settings, example_diagnoser)
        assert code == 0
        assert output.count("Diagnosis Report") == 4

    def test_uses_factory_when_no_diagnoser_given(self, settings: Settings) -> None:
        code, output = _run(["--demo", "out-of-gas"], settings)
        assert code == 0
        assert "Error Category: Gas Error" in output

    def test_classify_only_makes_no_ai_call(self, settings: Settings) -> None:
        diagnoser = MagicMock()
        code, output = _run(["--demo", "all", "--classify"], settings, diagnoser)
        assert code == 0
        assert "out-of-gas: Gas Error (OUT_OF_GAS)" in output
        assert "paused: Execution Revert (REVERT_NO_REASON)" in output
        diagnoser.diagnose.assert_not_called()

    def test_diagnosis_failure_exits_with_one(self, settings: Settings) -> None:
        diagnoser = MagicMock()
        diagnoser.diagnose.side_effect = DiagnosisError("AI returned empty response")
        code, _ = _run(["--demo", "slippage"], settings, diagnoser)
        assert code == 1

    def test_unexpected_error_exits_with_one(self, settings: Settings) -> None:
        diagnoser = MagicMock()
        diagnoser.diagnose.side_effect = RuntimeError("provider exploded")
        with patch("txdoctor.cli.commands.Log") as mock_log:
            code, output = _run(["--demo", "paused"], settings, diagnoser)
        assert code == 1
        assert "Diagnosis Report" not in output
        mock_log.exception.assert_called_once()


class TestBatch:
    def test_prints_summary(self, settings: Settings, example_diagnoser: Diagnoser) -> None:
        code, output = _run(["--batch"], settings, example_diagnoser)
        assert code == 0
        assert "Total: 4" in output
        assert "Analyzed: 4" in output
        assert "- Gas Error: 1" in output
        assert "- Execution Revert: 3" in output


class TestServe:
    def test_serve_starts_uvicorn(self, settings: Settings) -> None:
        with patch("txdoctor.api.server.uvicorn.run") as mock_run:
            code, _ = _run(["--serve"], settings)
        assert code == 0
        kwargs = mock_run.call_args.kwargs
        assert kwargs["port"] == settings.port
        assert kwargs["host"] == settings.host
