import logging
from typing import List, Optional

import config
from errors import PipelineError
from llm import LLM
from prompts import (
    NEWS_SCOUT_PROMPT_TEMPLATE,
    NEWS_SCOUT_SYSTEM_MESSAGE,
    NEWS_SCOUT_HEADLINES_PROMPT_TEMPLATE,
)
from tools.news import gather_market_headlines, format_headlines


logger = logging.getLogger("macrodesk.advisors.news_scout")

TOOL_SPEC = {
    "type": "function",
    "function": {
        "name": "get_verified_financial_news",
        "description": (
            "Searches reputable sources (Bloomberg, Reuters, FT, WSJ) for the most significant "
            "financial news of the recent past, verifies each item and returns a ranked list as text."
        ),
        "parameters": {"type": "object", "properties": {}},
    },
}


def _scout_from_headlines(llm: LLM, top_n: int, lookback_hours: int, sources: str) -> str:
    headlines = gather_market_headlines(lookback_hours)
    if not headlines:
        logger.warning("News Scout: headline search returned nothing")
        return ""
    prompt = NEWS_SCOUT_HEADLINES_PROMPT_TEMPLATE.format(
        top_n=top_n,
        lookback_hours=lookback_hours,
        sources=sources,
        headlines=format_headlines(headlines[:40]),
    )
    return llm.summarize(prompt, system=NEWS_SCOUT_SYSTEM_MESSAGE)


def run_news_scout(
    llm: LLM,
    top_n: Optional[int] = None,
    lookback_hours: Optional[int] = None,
    sources: Optional[List[str]] = None,
    use_web_search: Optional[bool] = None,
) -> str:
    """Return the ranked news list as free text (possibly empty)."""
    top_n = top_n or config.TOP_NEWS_COUNT
    lookback_hours = lookback_hours or config.NEWS_LOOKBACK_HOURS
    sources_text = ", ".join(sources or config.PREFERRED_NEWS_SOURCES)
    if use_web_search is None:
        use_web_search = config.USE_OPENAI_WEB_SEARCH

    try:
        if use_web_search:
            prompt = NEWS_SCOUT_PROMPT_TEMPLATE.format(
                top_n=top_n, lookback_hours=lookback_hours, sources=sources_text
            )
            text = llm.web_search(prompt, system=NEWS_SCOUT_SYSTEM_MESSAGE)
        else:
            logger.debug("News Scout: web search disabled; using headline search")
            text = _scout_from_headlines(llm, top_n, lookback_hours, sources_text)
    except Exception as e:
        logger.error("News Scout failed: %s", e)
        raise PipelineError("News Scout agent failed to retrieve news.", agent="news_scout") from e

    logger.debug("News Scout: %d chars", len(text or ""))
    return text or ""
