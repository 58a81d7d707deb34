from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field


class NewsItem(BaseModel):
    title: str
    url: str
    published_at: Optional[str] = None
    source: Optional[str] = None
    snippet: Optional[str] = None


class MacroAnalysisItem(BaseModel):
    news_summary: str
    importance_score: Optional[int] = Field(
        default=None,
        ge=1,
        le=10,
        description="1-10, potential global market impact (10 = most important)",
    )
    identified_macro_factors: List[str]
    impact_analysis: str

    class Config:
        extra = "ignore"  # Ignore extra fields


class MacroAnalysisResult(BaseModel):
    macro_analysis: List[MacroAnalysisItem]


class VerificationVerdict(BaseModel):
    verified: bool
    reason: str = ""
    flagged_items: List[str] = []

    class Config:
        extra = "ignore"  # Ignore extra fields


# JSON Schemas the model must follow. Strict structured outputs require every
# property to be listed in "required" and no additional properties, so the
# optional score is expressed as a nullable integer.
MACRO_ANALYSIS_JSON_SCHEMA = {
    "type": "object",
    "properties": {
        "macro_analysis": {
            "type": "array",
            "description": "One macro-economic analysis per ranked financial news item.",
            "items": {
                "type": "object",
                "properties": {
                    "news_summary": {
                        "type": "string",
                        "description": "A concise summary of the financial news item.",
                    },
                    "importance_score": {
                        "type": ["integer", "null"],
                        "description": "Integer from 1 to 10 rating the potential global market impact (10 being most important).",
                    },
                    "identified_macro_factors": {
                        "type": "array",
                        "description": "Key macro-economic factors in the news (e.g. inflation, interest rates, GDP growth, unemployment).",
                        "items": {"type": "string"},
                    },
                    "impact_analysis": {
                        "type": "string",
                        "description": "Analysis of the potential impact on the economy, markets and specific sectors.",
                    },
                },
                "required": [
                    "news_summary",
                    "importance_score",
                    "identified_macro_factors",
                    "impact_analysis",
                ],
                "additionalProperties": False,
            },
        }
    },
    "required": ["macro_analysis"],
    "additionalProperties": False,
}

VERIFICATION_JSON_SCHEMA = {
    "type": "object",
    "properties": {
        "verified": {"type": "boolean"},
        "reason": {"type": "string"},
        "flagged_items": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["verified", "reason", "flagged_items"],
    "additionalProperties": False,
}
