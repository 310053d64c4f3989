import logging
import time
import traceback
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional
from urllib.parse import urlparse

from common.constants import (
    CANDIDATE_POOL_SIZE,
    MSG_ANALYSIS_FAILED,
    MSG_EMPTY_URL,
    MSG_INVALID_URL,
    MSG_NO_CONTENT,
    MSG_TOKENIZER_NOT_READY,
    TARGET_WORD_COUNT,
)
from core.ports import DictionaryIO, PageIO, RunIO
from domain.analysis.errors import InputValidationError, PageFetchError
from domain.analysis.run_state import AnalysisRun
from domain.deck.deck_generation.candidates_picker import rank_candidates
from domain.deck.schemas.schema import AnnotatedWord, Candidate
from domain.nlp.content.content_adapter import ContentAdapter
from domain.nlp.lang.lang_adapter import LangAdapter
from pipelines.extract_pipeline import run_extract

logger = logging.getLogger(__name__)


def _t():
    return time.perf_counter()


def validate_submission(url: str, lang_adapter: LangAdapter) -> str:
    """
    Reject a submission before any run starts.
    Returns the trimmed url.
    """
    url = (url or "").strip()
    if not url:
        raise InputValidationError(MSG_EMPTY_URL)

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InputValidationError(MSG_INVALID_URL)

    if not lang_adapter.ready:
        raise InputValidationError(MSG_TOKENIZER_NOT_READY)
    return url


def annotate_candidate(
    candidate: Candidate,
    dictionary: DictionaryIO,
    romanize: Callable[[str], str],
) -> Optional[AnnotatedWord]:
    """
    Look one candidate up. None means "skip": sentinel entry or any failure.
    """
    try:
        entry = dictionary.lookup(candidate.surface)
        if entry.is_sentinel:
            logger.debug("Skipping %r: %s", candidate.surface, entry.definition)
            return None

        reading = entry.reading or romanize(candidate.surface)
        return AnnotatedWord(
            surface=candidate.surface,
            count=candidate.count,
            reading=reading,
            extra_reading_count=entry.extra_readings,
            definition=entry.definition,
            part_of_speech=entry.part_of_speech,
        )
    except Exception as e:
        logger.warning("Lookup for %r failed, skipping: %s", candidate.surface, e)
        return None


def annotate_candidates(
    candidates: List[Candidate],
    dictionary: DictionaryIO,
    romanize: Callable[[str], str],
    target: int = TARGET_WORD_COUNT,
    concurrency: int = 1,
) -> List[AnnotatedWord]:
    """
    Annotate candidates in ranked order until `target` words are kept
    or candidates run out.
    With concurrency > 1 lookups run in ranked batches of that size;
    kept words are still emitted in ranked order.
    """
    kept: List[AnnotatedWord] = []
    if target < 1 or not candidates:
        return kept

    if concurrency <= 1:
        for candidate in candidates:
            word = annotate_candidate(candidate, dictionary, romanize)
            if word is not None:
                kept.append(word)
            if len(kept) >= target:
                break
        return kept

    with ThreadPoolExecutor(max_workers=concurrency) as pool:
        for start in range(0, len(candidates), concurrency):
            batch = candidates[start : start + concurrency]
            # map() yields in submission order, whatever order lookups finish in
            results = pool.map(
                lambda c: annotate_candidate(c, dictionary, romanize), batch
            )
            for word in results:
                if word is not None:
                    kept.append(word)
                if len(kept) >= target:
                    return kept
    return kept


def analyze_content(
    content: str,
    lang_adapter: LangAdapter,
    dictionary: DictionaryIO,
    pool_size: int = CANDIDATE_POOL_SIZE,
    target: int = TARGET_WORD_COUNT,
    concurrency: int = 1,
) -> List[AnnotatedWord]:
    t0 = _t()

    # 1) tokens
    tokens = lang_adapter.tokenize(content)
    logger.info("Tokenized to %d tokens (%.3fs)", len(tokens), _t() - t0)

    # 2) candidates
    t1 = _t()
    candidates = rank_candidates(lang_adapter.surface_forms(tokens), pool_size)
    logger.info("Ranked %d candidates (%.3fs)", len(candidates), _t() - t1)

    # 3) dictionary
    t2 = _t()
    words = annotate_candidates(
        candidates, dictionary, lang_adapter.romanize, target, concurrency
    )
    logger.info(
        "Kept %d of %d candidates (%.3fs). Total: %.3fs",
        len(words),
        len(candidates),
        _t() - t2,
        _t() - t0,
    )
    return words


def run_analysis_pipeline(
    url: str,
    page_io: PageIO,
    content_adapter: ContentAdapter,
    lang_adapter: LangAdapter,
    dictionary: DictionaryIO,
    run_io: RunIO,
    pool_size: int = CANDIDATE_POOL_SIZE,
    target: int = TARGET_WORD_COUNT,
    concurrency: int = 1,
) -> AnalysisRun:
    """
    Submit -> loading -> success | no_results | failed.
    InputValidationError and RunInProgressError are raised before the stored run
    changes; everything after that ends in a finished run.
    """
    url = validate_submission(url, lang_adapter)
    run = run_io.begin(url)

    try:
        try:
            content = run_extract(url, page_io, content_adapter)
        except PageFetchError as e:
            return run_io.finish(run.fail(str(e)))

        if not content:
            return run_io.finish(run.fail(MSG_NO_CONTENT))

        words = analyze_content(
            content, lang_adapter, dictionary, pool_size, target, concurrency
        )
        return run_io.finish(run.succeed(words))

    except Exception:
        # Parser or tokenizer blew up: never leave the run loading
        logger.error(f"Failed to analyze: {url}\n{traceback.format_exc()[:8000]}")
        return run_io.finish(run.fail(MSG_ANALYSIS_FAILED))
