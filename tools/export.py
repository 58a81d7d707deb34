from __future__ import annotations
import json
import os

from schemas import MacroAnalysisResult

DOWNLOAD_FILENAME = "financial_analysis_output.json"


def to_jsonable(result: MacroAnalysisResult) -> dict:
    # A missing importance score stays missing instead of turning into null
    return result.model_dump(exclude_none=True)


def to_pretty_json(result: MacroAnalysisResult) -> str:
    return json.dumps(to_jsonable(result), indent=2, ensure_ascii=False)


def write_json(result: MacroAnalysisResult, path: str) -> str:
    """Write the pretty-printed result to `path` and return its absolute path."""
    abs_path = os.path.abspath(path)
    os.makedirs(os.path.dirname(abs_path) or ".", exist_ok=True)
    with open(abs_path, "w", encoding="utf-8") as f:
        f.write(to_pretty_json(result))
    return abs_path
