import logging
import threading
from typing import Optional

from common.constants import MSG_RUN_IN_PROGRESS
from domain.analysis.errors import RunInProgressError
from domain.analysis.run_state import AnalysisRun


class InMemoryRunIO:
    """
    Holds the one current analysis run for this process.
    Runs are replaced wholesale, never edited in place.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._current: Optional[AnalysisRun] = None

    def get_current(self) -> AnalysisRun:
        with self._lock:
            return self._current or AnalysisRun.idle()

    def begin(self, url: str) -> AnalysisRun:
        """
        Replace the current run with a fresh loading run.
        Raises RunInProgressError if another run is still loading.
        """
        with self._lock:
            if self._current is not None and self._current.loading:
                raise RunInProgressError(MSG_RUN_IN_PROGRESS)
            self._current = AnalysisRun.start(url)
            logging.info(f"Started run for {url}")
            return self._current

    def finish(self, run: AnalysisRun) -> AnalysisRun:
        with self._lock:
            self._current = run
            logging.info(f"Run for {run.url} finished with status {run.status}")
            return run
