"""Shared fakes: a scripted stand-in for llm.LLM so no test touches the network."""
import pytest

import config


class FakeLLM:
    """Replays queued responses per method; an Exception in a queue is raised."""

    def __init__(self, web_search=None, reason=None, summarize=None):
        self.queues = {
            "web_search": list(web_search or []),
            "reason": list(reason or []),
            "summarize": list(summarize or []),
        }
        self.calls = []

    def _next(self, method, prompt, kwargs):
        self.calls.append((method, prompt, kwargs))
        queue = self.queues[method]
        if not queue:
            raise AssertionError(f"unexpected {method} call")
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def web_search(self, prompt, system=None, json_schema=None, schema_name="response"):
        return self._next("web_search", prompt, {"system": system, "json_schema": json_schema})

    def reason(self, prompt, system=None, response_format=None):
        return self._next("reason", prompt, {"system": system, "response_format": response_format})

    def summarize(self, prompt, system=None):
        return self._next("summarize", prompt, {"system": system})

    def methods_called(self):
        return [c[0] for c in self.calls]


@pytest.fixture(autouse=True)
def _stable_config(monkeypatch):
    monkeypatch.setattr(config, "USE_OPENAI_WEB_SEARCH", True)
    monkeypatch.setattr(config, "ENABLE_VERIFICATION", True)
    monkeypatch.setattr(config, "NEWS_LOOKBACK_HOURS", 48)
    monkeypatch.setattr(config, "TOP_NEWS_COUNT", 5)


@pytest.fixture
def fake_llm_factory():
    return FakeLLM


SCOUT_TEXT = "1. Fed raises rates by 25bp (Reuters)\n2. Oil jumps on supply cuts (Bloomberg)"

VERIFIED_JSON = '{"verified": true, "reason": "All items confirmed.", "flagged_items": []}'

ANALYSIS_JSON = (
    '{"macro_analysis": ['
    '{"news_summary": "Fed raises rates", "importance_score": 9,'
    ' "identified_macro_factors": ["interest rates"], "impact_analysis": "Tighter credit."},'
    '{"news_summary": "Oil jumps", "importance_score": 7,'
    ' "identified_macro_factors": ["energy prices", "inflation"], "impact_analysis": "Cost pressure."}'
    "]}"
)
