from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from schemas import MacroAnalysisResult
from tools.export import to_pretty_json

INITIAL_STATUS = "Initiating analysis..."


@dataclass
class AnalysisViewState:
    """What the page shows: loading, an error, or a result.

    Starts in the loading state so the first page load runs the analysis.
    """

    is_loading: bool = True
    status_message: str = INITIAL_STATUS
    result: Optional[MacroAnalysisResult] = None
    error: Optional[str] = None

    @property
    def button_label(self) -> str:
        if self.is_loading:
            return "Analyzing..."
        return "Try Again" if self.error else "Re-run Analysis"

    def request_run(self) -> bool:
        """Arm a new run. Ignored while one is already loading."""
        if self.is_loading:
            return False
        self.is_loading = True
        self.status_message = INITIAL_STATUS
        self.result = None
        self.error = None
        return True

    def update_status(self, message: str) -> None:
        self.status_message = message

    def complete(self, result: Optional[MacroAnalysisResult]) -> None:
        self.is_loading = False
        if result is None:
            self.result = None
            self.error = "The analysis could not be completed."
            self.status_message = "Analysis failed."
            return
        self.result = result
        self.error = None
        self.status_message = "Analysis complete."

    def fail(self, message: str) -> None:
        self.is_loading = False
        self.result = None
        self.error = f"An error occurred: {message}"
        self.status_message = "Analysis failed."

    def download_payload(self) -> Optional[str]:
        if self.result is None:
            return None
        return to_pretty_json(self.result)
