class AnalysisError(Exception):
    """Base class for errors raised while serving an analysis."""


class InputValidationError(AnalysisError):
    """Submission rejected before a run starts (empty URL, tokenizer not ready)."""


class RunInProgressError(AnalysisError):
    """Another run is still loading."""


class PageFetchError(AnalysisError):
    """The page could not be fetched or was not text."""
