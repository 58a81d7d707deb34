import streamlit as st
from logging_config import setup_logging
import orchestrator
from errors import PipelineError
from tools.export import DOWNLOAD_FILENAME
from ui_state import AnalysisViewState

logger = setup_logging()

st.set_page_config(page_title="Financial News Analysis", layout="centered")

st.title("Financial News Analysis")
st.caption("An AI-powered multi-agent system for macro-economic insights.")

# One view state per browser session; created in the loading state so the
# analysis runs once on first load.
if "view" not in st.session_state:
    st.session_state["view"] = AnalysisViewState()
view: AnalysisViewState = st.session_state["view"]


def _on_run_clicked():
    if not st.session_state["view"].request_run():
        logger.debug("Run requested while an analysis is loading; ignored")


st.button(view.button_label, on_click=_on_run_clicked, disabled=view.is_loading, type="primary")

if view.is_loading:
    status_box = st.empty()
    status_box.info(view.status_message)

    def _on_status(message: str) -> None:
        view.update_status(message)
        status_box.info(message)

    with st.spinner("Agents at work..."):
        try:
            result = orchestrator.run_analysis(on_status=_on_status)
        except PipelineError as e:
            view.fail(e.message)
        else:
            view.complete(result)
    st.rerun()

if view.error:
    st.error(view.error)

if view.result is not None:
    payload = view.download_payload()
    st.subheader("Analysis Result")
    st.caption(f"{len(view.result.macro_analysis)} news items analyzed")
    st.code(payload, language="json")
    st.download_button(
        "Download JSON",
        data=payload,
        file_name=DOWNLOAD_FILENAME,
        mime="application/json",
    )
elif not view.error:
    st.info("Analysis will begin shortly.")

st.caption("Powered by OpenAI")
