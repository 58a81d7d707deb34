import json
import logging

from pydantic import ValidationError

from errors import EmptyResponseError, InvalidAnalysisError, PipelineError
from llm import LLM, extract_json, json_schema_format
from prompts import MACRO_ANALYST_PROMPT_TEMPLATE, MACRO_ANALYST_SYSTEM_MESSAGE
from schemas import MacroAnalysisResult, MACRO_ANALYSIS_JSON_SCHEMA


logger = logging.getLogger("macrodesk.advisors.macro_analyst")

TOOL_SPEC = {
    "type": "function",
    "function": {
        "name": "get_macro_economic_analysis",
        "description": (
            "Performs a macro-economic analysis of verified financial news items and returns "
            "structured JSON with an importance score for each item."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "news_items_text": {
                    "type": "string",
                    "description": "The compiled and verified news items to analyze.",
                }
            },
            "required": ["news_items_text"],
        },
    },
}


def run_macro_analyst(llm: LLM, news_text: str) -> MacroAnalysisResult:
    prompt = MACRO_ANALYST_PROMPT_TEMPLATE.format(news_text=news_text)
    try:
        text = llm.reason(
            prompt,
            system=MACRO_ANALYST_SYSTEM_MESSAGE,
            response_format=json_schema_format("macro_analysis", MACRO_ANALYSIS_JSON_SCHEMA),
        )
    except Exception as e:
        logger.error("Macro Analyst request failed: %s", e)
        raise PipelineError("Macro Analyst agent failed to generate analysis.", agent="macro_analyst") from e

    result_json = (text or "").strip()
    if not result_json:
        raise EmptyResponseError()

    try:
        data = json.loads(extract_json(result_json))
        result = MacroAnalysisResult.model_validate(data)
    except (ValidationError, json.JSONDecodeError, RecursionError) as e:
        logger.error("Macro Analyst JSON invalid: %s", e)
        raise InvalidAnalysisError() from e

    logger.debug("Macro Analyst: %d items", len(result.macro_analysis))
    return result
