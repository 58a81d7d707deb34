from __future__ import annotations
import json
import logging
import os
import time
from datetime import datetime, timezone
from typing import Callable, List, Optional
from typing_extensions import TypedDict
from langgraph.graph import StateGraph, END

import config
from advisors import macro_analyst, news_scout, verifier
from errors import (
    INCOMPLETE_RUN_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    NoContentError,
    PipelineError,
)
from llm import LLM
from schemas import MacroAnalysisResult
from tools.export import to_jsonable

logger = logging.getLogger("macrodesk.orchestrator")

StatusCallback = Callable[[str], None]

STATUS_SCOUT = "Orchestrator: Calling News Scout Agent..."
STATUS_VERIFY = "Orchestrator: Calling Verification Agent..."
STATUS_ANALYST = "Orchestrator: Calling Macro Analyst Agent..."


class GraphState(TypedDict, total=False):
    requested_at: str
    news_text: str
    verified_text: str
    result: MacroAnalysisResult


def list_agent_tools() -> List[dict]:
    """Function-tool descriptors of the agents, in pipeline order."""
    return [news_scout.TOOL_SPEC, verifier.TOOL_SPEC, macro_analyst.TOOL_SPEC]


def _noop_status(message: str) -> None:
    return None


class AnalysisOrchestrator:
    """Runs News Scout -> (Verification) -> Macro Analyst as a linear graph.

    `on_status` is called before every step. The first failing step aborts
    the run; its PipelineError reaches the caller unchanged.
    """

    def __init__(
        self,
        llm: LLM,
        on_status: Optional[StatusCallback] = None,
        verify: Optional[bool] = None,
        run_dir: Optional[str] = None,
    ):
        self.llm = llm
        self.on_status = on_status or _noop_status
        self.verify = config.ENABLE_VERIFICATION if verify is None else verify
        self.run_dir = run_dir

    def _save_json_if_possible(self, filename: str, payload: dict) -> None:
        if not self.run_dir:
            return
        try:
            os.makedirs(self.run_dir, exist_ok=True)
            path = os.path.join(self.run_dir, filename)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.debug("Save failed for %s: %s", filename, e)

    def _save_text_if_possible(self, filename: str, text: str) -> None:
        if not self.run_dir:
            return
        try:
            os.makedirs(self.run_dir, exist_ok=True)
            path = os.path.join(self.run_dir, filename)
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            logger.debug("Save text failed for %s: %s", filename, e)

    def node_scout(self, state: GraphState) -> GraphState:
        start = time.perf_counter()
        logger.info("Run requested at %s", state["requested_at"])
        self._save_json_if_possible(
            "request.json",
            {"requested_at": state["requested_at"], "verification": bool(self.verify)},
        )
        self.on_status(STATUS_SCOUT)
        news_text = news_scout.run_news_scout(self.llm)
        if not news_text or not news_text.strip():
            raise NoContentError()
        self._save_text_if_possible("scout.txt", news_text)
        logger.debug("Stage scout: %d chars (%.2f ms)", len(news_text), (time.perf_counter() - start) * 1000)
        return {"news_text": news_text}

    def node_verify(self, state: GraphState) -> GraphState:
        start = time.perf_counter()
        self.on_status(STATUS_VERIFY)
        verified_text = verifier.verify_news(self.llm, state["news_text"])
        self._save_text_if_possible("verified.txt", verified_text)
        logger.debug("Stage verify: passed (%.2f ms)", (time.perf_counter() - start) * 1000)
        return {"verified_text": verified_text}

    def node_analyze(self, state: GraphState) -> GraphState:
        start = time.perf_counter()
        self.on_status(STATUS_ANALYST)
        news_text = state.get("verified_text") or state["news_text"]
        result = macro_analyst.run_macro_analyst(self.llm, news_text)
        self._save_json_if_possible("analysis.json", to_jsonable(result))
        logger.debug(
            "Stage analyze: items=%d (%.2f ms)",
            len(result.macro_analysis),
            (time.perf_counter() - start) * 1000,
        )
        return {"result": result}

    def build_graph(self):
        g = StateGraph(GraphState)
        g.add_node("n_scout", self.node_scout)
        g.add_node("n_analyze", self.node_analyze)
        g.set_entry_point("n_scout")
        if self.verify:
            g.add_node("n_verify", self.node_verify)
            g.add_edge("n_scout", "n_verify")
            g.add_edge("n_verify", "n_analyze")
        else:
            g.add_edge("n_scout", "n_analyze")
        g.add_edge("n_analyze", END)
        return g.compile()

    def run(self) -> MacroAnalysisResult:
        start = time.perf_counter()
        logger.info("Starting analysis run (verification=%s)", "on" if self.verify else "off")
        try:
            final_state = self.build_graph().invoke(
                {"requested_at": datetime.now(timezone.utc).isoformat()}
            )
        except PipelineError as e:
            logger.error("Orchestrator failed: %s", e)
            raise
        except Exception as e:
            logger.exception("Orchestrator failed with an unexpected error")
            raise PipelineError(UNKNOWN_ERROR_MESSAGE) from e

        result = final_state.get("result")
        if result is None:
            logger.error("Orchestrator finished without a result")
            raise PipelineError(INCOMPLETE_RUN_MESSAGE)
        logger.info(
            "Analysis complete: %d items in %.1f s",
            len(result.macro_analysis),
            time.perf_counter() - start,
        )
        return result


def run_analysis(
    on_status: Optional[StatusCallback] = None,
    llm: Optional[LLM] = None,
    verify: Optional[bool] = None,
    run_dir: Optional[str] = None,
) -> MacroAnalysisResult:
    """Run the full pipeline once and return the validated result."""
    if llm is None:
        try:
            llm = LLM()
        except Exception as e:
            logger.exception("Could not construct the model client")
            raise PipelineError(UNKNOWN_ERROR_MESSAGE) from e
    orchestrator = AnalysisOrchestrator(llm, on_status=on_status, verify=verify, run_dir=run_dir)
    return orchestrator.run()
