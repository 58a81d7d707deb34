from __future__ import annotations
import logging
import re
from typing import Optional

from openai import APIConnectionError, InternalServerError, OpenAI, RateLimitError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

import config

logger = logging.getLogger("macrodesk.llm")

# Only transport-level hiccups are retried; bad model output is the caller's problem.
_TRANSIENT_ERRORS = (APIConnectionError, RateLimitError, InternalServerError)

_retry_transient = retry(
    retry=retry_if_exception_type(_TRANSIENT_ERRORS),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=8),
    reraise=True,
)

_FENCED_JSON = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def json_schema_format(name: str, schema: dict) -> dict:
    """Chat Completions `response_format` for strict structured output."""
    return {
        "type": "json_schema",
        "json_schema": {"name": name, "schema": schema, "strict": True},
    }


def extract_json(text: str) -> str:
    """Strip a Markdown code fence the model sometimes wraps around JSON."""
    stripped = (text or "").strip()
    match = _FENCED_JSON.match(stripped)
    return match.group(1) if match else stripped


class LLM:
    """Thin wrapper over the OpenAI SDK.

    Built explicitly and passed to the agents. Pass `client` to substitute
    the SDK (tests), or `api_key` to override the configured key.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        client=None,
        timeout_seconds: Optional[float] = None,
        reasoning_model: Optional[str] = None,
        summary_model: Optional[str] = None,
        search_model: Optional[str] = None,
    ):
        if client is None:
            client = OpenAI(api_key=api_key if api_key is not None else config.OPENAI_API_KEY)
        self.client = client
        self.timeout_s: float = (
            timeout_seconds if timeout_seconds is not None else config.OPENAI_TIMEOUT_SECONDS
        )
        self.reasoning_model = reasoning_model or config.REASONING_MODEL
        self.summary_model = summary_model or config.SUMMARY_MODEL
        self.search_model = search_model or config.SEARCH_MODEL

    @_retry_transient
    def summarize(self, prompt: str, system: Optional[str] = None) -> str:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        resp = self.client.chat.completions.create(
            model=self.summary_model,
            messages=messages,
            temperature=0.3,
            timeout=self.timeout_s,
        )
        return resp.choices[0].message.content or ""

    @_retry_transient
    def reason(self, prompt: str, system: Optional[str] = None, response_format: Optional[dict] = None) -> str:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        kwargs = {}
        if response_format:
            kwargs["response_format"] = response_format
        resp = self.client.chat.completions.create(
            model=self.reasoning_model,
            messages=messages,
            **kwargs,
            timeout=self.timeout_s,
        )
        return resp.choices[0].message.content or ""

    @_retry_transient
    def web_search(
        self,
        prompt: str,
        system: Optional[str] = None,
        json_schema: Optional[dict] = None,
        schema_name: str = "response",
    ) -> str:
        """Run a Responses API request with the provider's web_search tool.

        When `json_schema` is given the answer is constrained to it and the
        returned string is the JSON document.
        """
        kwargs = {}
        if system:
            kwargs["instructions"] = system
        if json_schema:
            kwargs["text"] = {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "schema": json_schema,
                    "strict": True,
                }
            }
        resp = self.client.responses.create(
            model=self.search_model,
            input=[{"role": "user", "content": prompt}],
            tools=[{"type": "web_search"}],
            timeout=self.timeout_s,
            **kwargs,
        )
        # The structure may vary; concatenate the text parts of message items
        parts = []
        for item in getattr(resp, "output", None) or []:
            if getattr(item, "type", None) == "message" and item.content:
                for c in item.content:
                    if getattr(c, "type", None) == "output_text":
                        parts.append(c.text)
        if parts:
            return "\n".join(parts)
        logger.debug("web_search: no message output items, falling back to output_text")
        return getattr(resp, "output_text", None) or ""
