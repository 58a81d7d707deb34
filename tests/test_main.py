import json
from unittest.mock import patch

import pytest

import main
from errors import NoContentError
from schemas import MacroAnalysisResult
from conftest import ANALYSIS_JSON


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_list_tools_prints_descriptors(capsys):
    assert main.main(["--list-tools"]) == 0

    tools = json.loads(capsys.readouterr().out)
    assert [t["function"]["name"] for t in tools] == [
        "get_verified_financial_news",
        "verify_financial_news_content",
        "get_macro_economic_analysis",
    ]


def test_success_prints_and_writes_output(tmp_path, capsys):
    result = MacroAnalysisResult.model_validate_json(ANALYSIS_JSON)
    with patch("main.run_analysis", return_value=result) as run:
        code = main.main(["--no-verify", "-o", "out/analysis.json"])

    assert code == 0
    assert run.call_args.kwargs["verify"] is False
    assert json.loads(capsys.readouterr().out) == json.loads(ANALYSIS_JSON)
    saved = json.loads((tmp_path / "out" / "analysis.json").read_text(encoding="utf-8"))
    assert saved == json.loads(ANALYSIS_JSON)


def test_verify_defaults_to_config():
    result = MacroAnalysisResult(macro_analysis=[])
    with patch("main.run_analysis", return_value=result) as run:
        main.main([])
    assert run.call_args.kwargs["verify"] is None


def test_auto_run_dir_is_timestamped(tmp_path):
    result = MacroAnalysisResult(macro_analysis=[])
    with patch("main.run_analysis", return_value=result) as run:
        main.main(["--run-dir", "auto"])

    run_dir = run.call_args.kwargs["run_dir"]
    assert run_dir.startswith("runs")
    assert (tmp_path / run_dir).is_dir()


def test_failure_reports_message_and_exit_code(capsys):
    with patch("main.run_analysis", side_effect=NoContentError()):
        code = main.main([])

    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Analysis failed: News Scout returned no content." in captured.err
