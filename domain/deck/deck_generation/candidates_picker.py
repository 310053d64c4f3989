from collections import Counter
from typing import Iterable, List

import regex as re

from common.constants import CANDIDATE_POOL_SIZE
from domain.deck.schemas.schema import Candidate

# CJK Unified Ideographs as used for "contains kanji"
_KANJI_RE = re.compile(r"[\u4E00-\u9FAF]")


def is_kanji_word(form: str) -> bool:
    """Longer than one character and at least one ideograph in U+4E00-U+9FAF."""
    return len(form) > 1 and _KANJI_RE.search(form) is not None


def count_forms(forms: Iterable[str]) -> Counter:
    """
    Count qualifying surface forms. Exact string identity, no lemmatization.
    Counter keeps first-insertion order, which is what the tie-break relies on.
    """
    counted: Counter = Counter()
    for form in forms:
        if is_kanji_word(form):
            counted[form] += 1
    return counted


def rank_candidates(
    forms: Iterable[str], pool_size: int = CANDIDATE_POOL_SIZE
) -> List[Candidate]:
    """
    Rank qualifying forms by count, descending.
    Equal counts keep first-seen order (sorted is stable, also with reverse).
    The pool is capped so some candidates can be dropped for lacking a definition
    and the target count is still reachable.
    """
    if pool_size < 1:
        raise ValueError("pool_size must be >= 1")

    counted = count_forms(forms)
    ranked = sorted(counted.items(), key=lambda item: item[1], reverse=True)
    return [Candidate(surface=form, count=count) for form, count in ranked[:pool_size]]
