from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from common.constants import (
    ERROR_NO_RESULTS,
    ERROR_TRANSPORT,
    MSG_NO_RESULTS,
    STATUS_FAILED,
    STATUS_IDLE,
    STATUS_LOADING,
    STATUS_NO_RESULTS,
    STATUS_SUCCESS,
)
from domain.deck.schemas.schema import AnnotatedWord

RUN_STATUS = Literal["idle", "loading", "success", "no_results", "failed"]
ERROR_KIND = Literal["input", "no_results", "transport"]


class RunError(BaseModel):
    kind: ERROR_KIND
    message: str


class AnalysisRun(BaseModel):
    """
    State of one analysis.
    idle -> loading -> success | no_results | failed
    A run is never reused: every submission starts from a fresh loading run.
    """

    url: str = ""
    status: RUN_STATUS = STATUS_IDLE
    error: Optional[RunError] = None
    results: List[AnnotatedWord] = Field(default_factory=list)

    @property
    def loading(self) -> bool:
        return self.status == STATUS_LOADING

    @classmethod
    def idle(cls) -> "AnalysisRun":
        return cls()

    @classmethod
    def start(cls, url: str) -> "AnalysisRun":
        return cls(url=url, status=STATUS_LOADING)

    def succeed(self, results: List[AnnotatedWord]) -> "AnalysisRun":
        if not results:
            return self.model_copy(
                update={
                    "status": STATUS_NO_RESULTS,
                    "error": RunError(kind=ERROR_NO_RESULTS, message=MSG_NO_RESULTS),
                    "results": [],
                }
            )
        return self.model_copy(
            update={"status": STATUS_SUCCESS, "error": None, "results": list(results)}
        )

    def fail(self, message: str) -> "AnalysisRun":
        return self.model_copy(
            update={
                "status": STATUS_FAILED,
                "error": RunError(kind=ERROR_TRANSPORT, message=message),
                "results": [],
            }
        )
