import logging
from typing import List, Optional, Sequence
from duckduckgo_search import DDGS

from schemas import NewsItem

logger = logging.getLogger("macrodesk.tools.news")

MARKET_NEWS_QUERIES = (
    "global markets financial news",
    "central bank interest rates decision",
    "inflation GDP economic data release",
    "stock market selloff rally",
)


def _timelimit_for(lookback_hours: int) -> str:
    # DDG only knows day/week/month buckets
    if lookback_hours <= 24:
        return "d"
    if lookback_hours <= 24 * 7:
        return "w"
    return "m"


def search_news_ddg(query: str, max_results: int = 10, timelimit: Optional[str] = None) -> List[NewsItem]:
    items: List[NewsItem] = []
    try:
        with DDGS() as ddgs:
            for r in ddgs.news(keywords=query, region="wt-wt", timelimit=timelimit, max_results=max_results):
                items.append(
                    NewsItem(
                        title=r.get("title", ""),
                        url=r.get("url", ""),
                        published_at=r.get("date"),
                        source=r.get("source"),
                        snippet=r.get("body"),
                    )
                )
    except Exception as e:
        logger.warning("DDG news search failed for %r: %s", query, e)
    return items


def gather_market_headlines(
    lookback_hours: int,
    queries: Sequence[str] = MARKET_NEWS_QUERIES,
    max_results_per_query: int = 8,
) -> List[NewsItem]:
    """Collect de-duplicated market headlines across several news queries."""
    timelimit = _timelimit_for(lookback_hours)
    seen = set()
    headlines: List[NewsItem] = []
    for query in queries:
        for item in search_news_ddg(query, max_results=max_results_per_query, timelimit=timelimit):
            key = item.url or item.title.strip().lower()
            if not key or key in seen:
                continue
            seen.add(key)
            headlines.append(item)
    logger.debug("NewsTool: %d unique headlines from %d queries", len(headlines), len(queries))
    return headlines


def format_headlines(items: Sequence[NewsItem]) -> str:
    lines = []
    for n in items:
        meta = ", ".join(x for x in (n.source, n.published_at) if x)
        line = f"- {n.title}"
        if meta:
            line += f" [{meta}]"
        if n.snippet:
            line += f": {n.snippet}"
        if n.url:
            line += f" ({n.url})"
        lines.append(line)
    return "\n".join(lines)
