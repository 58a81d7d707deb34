import json
import os
from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from errors import NoContentError
from schemas import MacroAnalysisResult
from conftest import ANALYSIS_JSON

APP_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "streamlit_app.py")


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_first_load_runs_analysis_and_shows_json():
    result = MacroAnalysisResult.model_validate_json(ANALYSIS_JSON)
    with patch("orchestrator.run_analysis", return_value=result) as run:
        at = AppTest.from_file(APP_PATH, default_timeout=10).run()

    assert run.call_count == 1
    assert not at.exception
    assert json.loads(at.code[0].value) == json.loads(ANALYSIS_JSON)
    assert at.button[0].label == "Re-run Analysis"
    assert len(at.error) == 0


def test_failure_shows_error_and_try_again():
    with patch("orchestrator.run_analysis", side_effect=NoContentError()):
        at = AppTest.from_file(APP_PATH, default_timeout=10).run()

    assert at.error[0].value == "An error occurred: News Scout returned no content."
    assert at.button[0].label == "Try Again"
    assert len(at.code) == 0


def test_rerun_button_starts_a_new_analysis():
    result = MacroAnalysisResult.model_validate_json(ANALYSIS_JSON)
    with patch("orchestrator.run_analysis", return_value=result) as run:
        at = AppTest.from_file(APP_PATH, default_timeout=10).run()
        at.button[0].click().run()

    assert run.call_count == 2
    assert at.button[0].label == "Re-run Analysis"
