from typing import Protocol

from domain.analysis.run_state import AnalysisRun
from domain.deck.schemas.schema import DictionaryEntry
from domain.nlp.content.content_adapter import FetchedPage


class DictionaryIO(Protocol):
    def lookup(self, word: str) -> DictionaryEntry: ...


class PageIO(Protocol):
    def fetch(self, url: str) -> FetchedPage: ...


class RunIO(Protocol):
    def get_current(self) -> AnalysisRun: ...

    def begin(self, url: str) -> AnalysisRun: ...

    def finish(self, run: AnalysisRun) -> AnalysisRun: ...
