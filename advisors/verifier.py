import logging
from typing import Optional

from pydantic import ValidationError

import config
from errors import PipelineError, VerificationFailedError
from llm import LLM, extract_json, json_schema_format
from prompts import VERIFICATION_PROMPT_TEMPLATE, VERIFICATION_SYSTEM_MESSAGE
from schemas import VerificationVerdict, VERIFICATION_JSON_SCHEMA


logger = logging.getLogger("macrodesk.advisors.verifier")

TOOL_SPEC = {
    "type": "function",
    "function": {
        "name": "verify_financial_news_content",
        "description": (
            "Fact-checks a block of news items: confirms each story is real, accurate and recent, "
            "and returns the text unchanged when everything checks out."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "unverified_news_text": {
                    "type": "string",
                    "description": "News items from the News Scout to be verified.",
                }
            },
            "required": ["unverified_news_text"],
        },
    },
}


def request_verdict(
    llm: LLM,
    news_text: str,
    lookback_hours: Optional[int] = None,
    use_web_search: Optional[bool] = None,
) -> VerificationVerdict:
    lookback_hours = lookback_hours or config.NEWS_LOOKBACK_HOURS
    if use_web_search is None:
        use_web_search = config.USE_OPENAI_WEB_SEARCH
    prompt = VERIFICATION_PROMPT_TEMPLATE.format(lookback_hours=lookback_hours, news_text=news_text)

    try:
        if use_web_search:
            text = llm.web_search(
                prompt,
                system=VERIFICATION_SYSTEM_MESSAGE,
                json_schema=VERIFICATION_JSON_SCHEMA,
                schema_name="verification_verdict",
            )
        else:
            text = llm.reason(
                prompt,
                system=VERIFICATION_SYSTEM_MESSAGE,
                response_format=json_schema_format("verification_verdict", VERIFICATION_JSON_SCHEMA),
            )
    except Exception as e:
        logger.error("Verification failed: %s", e)
        raise PipelineError("Verification agent failed to complete the fact-check.", agent="verification") from e

    try:
        return VerificationVerdict.model_validate_json(extract_json(text))
    except ValidationError as e:
        logger.error("Verification verdict unreadable: %s", e)
        raise PipelineError("Verification agent returned an unreadable verdict.", agent="verification") from e


def verify_news(
    llm: LLM,
    news_text: str,
    lookback_hours: Optional[int] = None,
    use_web_search: Optional[bool] = None,
) -> str:
    """Return `news_text` unchanged if the fact-check passes, raise otherwise."""
    verdict = request_verdict(llm, news_text, lookback_hours=lookback_hours, use_web_search=use_web_search)
    if not verdict.verified:
        logger.warning("Verification rejected news: %s (flagged=%s)", verdict.reason, verdict.flagged_items)
        raise VerificationFailedError(verdict)
    logger.debug("Verification passed: %s", verdict.reason)
    return news_text
