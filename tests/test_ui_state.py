from schemas import MacroAnalysisItem, MacroAnalysisResult
from ui_state import AnalysisViewState, INITIAL_STATUS


def _result():
    return MacroAnalysisResult(
        macro_analysis=[
            MacroAnalysisItem(
                news_summary="Fed raises rates",
                identified_macro_factors=["interest rates"],
                impact_analysis="...",
            )
        ]
    )


def test_starts_loading_so_first_load_runs_once():
    view = AnalysisViewState()
    assert view.is_loading
    assert view.status_message == INITIAL_STATUS
    assert view.button_label == "Analyzing..."
    assert view.download_payload() is None


def test_rerun_request_ignored_while_loading():
    view = AnalysisViewState()
    view.update_status("Orchestrator: Calling News Scout Agent...")

    assert view.request_run() is False
    assert view.is_loading
    assert view.status_message == "Orchestrator: Calling News Scout Agent..."


def test_complete_shows_result_and_download():
    view = AnalysisViewState()
    view.complete(_result())

    assert not view.is_loading
    assert view.error is None
    assert view.status_message == "Analysis complete."
    assert view.button_label == "Re-run Analysis"
    assert '"news_summary": "Fed raises rates"' in view.download_payload()


def test_complete_without_result_is_an_error():
    view = AnalysisViewState()
    view.complete(None)

    assert view.error == "The analysis could not be completed."
    assert view.status_message == "Analysis failed."
    assert view.button_label == "Try Again"


def test_fail_then_rerun_clears_previous_state():
    view = AnalysisViewState()
    view.fail("News Scout returned no content.")

    assert view.error == "An error occurred: News Scout returned no content."
    assert view.result is None
    assert view.button_label == "Try Again"

    assert view.request_run() is True
    assert view.is_loading
    assert view.error is None
    assert view.status_message == INITIAL_STATUS


def test_rerun_after_success_drops_old_result():
    view = AnalysisViewState()
    view.complete(_result())

    view.request_run()

    assert view.result is None
    assert view.download_payload() is None
