from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from schemas import VerificationVerdict


UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during orchestration."
INCOMPLETE_RUN_MESSAGE = "The analysis could not be completed."


class PipelineError(RuntimeError):
    """A step of the analysis pipeline failed.

    The message is shown to the user verbatim, so it should read as a sentence.
    """

    def __init__(self, message: str, agent: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.agent = agent


class NoContentError(PipelineError):
    def __init__(self, message: str = "News Scout returned no content."):
        super().__init__(message, agent="news_scout")


class VerificationFailedError(PipelineError):
    def __init__(self, verdict: "VerificationVerdict"):
        super().__init__(f"Verification agent rejected the news: {verdict.reason}", agent="verification")
        self.verdict = verdict


class EmptyResponseError(PipelineError):
    def __init__(self, message: str = "Macro Analyst returned an empty response."):
        super().__init__(message, agent="macro_analyst")


class InvalidAnalysisError(PipelineError):
    def __init__(
        self,
        message: str = "Macro Analyst agent failed to generate analysis. The model may have returned invalid JSON.",
    ):
        super().__init__(message, agent="macro_analyst")
