from __future__ import annotations
import logging
from typing import Iterable, List, Protocol, Sequence

from .models import Candidate, QueryResult, ScoredMatch, SearchConfiguration
from .normalize import split_words, strip_prefix

log = logging.getLogger(__name__)

# Tier scores
PHRASE = 100
SEQUENCE = 80
WORD_SET = 60
NO_MATCH = 0


def _phrase_match(name: str, term: str) -> bool:
    return term in name

def _sequence_match(name: str, words: List[str]) -> bool:
    # single cursor, never backtracks: each word is searched from the end of
    # the previous word's first match onwards
    if not words:
        return False
    pos = 0
    for w in words:
        found = name.find(w, pos)
        if found == -1:
            return False
        pos = found + len(w)
    return True

def _word_set_match(name: str, words: List[str]) -> bool:
    if not words:
        return False
    return all(w in name for w in words)


def score(filename: str, term: str) -> int:
    """
    Score `filename` against `term`, case-insensitive.
      100 -> the whole term appears contiguously
       80 -> the words appear in order (not necessarily adjacent)
       60 -> every word appears somewhere
        0 -> none of the above (also for an empty term)
    The first satisfied tier wins.
    """
    if not term:
        return NO_MATCH
    name = filename.lower()
    t = term.lower()
    if _phrase_match(name, t):
        return PHRASE
    words = split_words(t)
    if _sequence_match(name, words):
        return SEQUENCE
    if _word_set_match(name, words):
        return WORD_SET
    return NO_MATCH


class Scorer(Protocol):
    def __call__(self, filename: str) -> int: ...


class FuzzyScorer:
    """Three-tier scoring of the prefix-stripped term."""

    def __init__(self, term: str) -> None:
        self.term = term

    def __call__(self, filename: str) -> int:
        return score(filename, self.term)


class SubstringScorer:
    """
    Legacy binary matching: a name matches when it contains either the full
    input or the prefix-stripped term.
    """

    def __init__(self, raw: str, term: str) -> None:
        self._needles = [s.lower() for s in (raw, term) if s]

    def __call__(self, filename: str) -> int:
        name = filename.lower()
        return PHRASE if any(n in name for n in self._needles) else NO_MATCH


def scorer_for(raw: str, term: str, config: SearchConfiguration) -> Scorer:
    """Pick the scoring strategy once per query."""
    if config.fuzzy_matching:
        return FuzzyScorer(term)
    return SubstringScorer(raw, term)


def rank(candidates: Iterable[Candidate], scorer: Scorer, limit: int) -> tuple[List[ScoredMatch], int]:
    """
    Score every candidate, drop zeros, and order by descending score.
    sorted() is stable, so ties keep the order of `candidates`.
    Returns (top `limit` matches, number cut off).
    """
    scored: List[ScoredMatch] = []
    for c in candidates:
        s = scorer(c.display_name)
        if s > NO_MATCH:
            scored.append(ScoredMatch(candidate=c, score=s))
    scored.sort(key=lambda m: -m.score)
    limit = max(0, limit)
    return scored[:limit], max(0, len(scored) - limit)


def run(raw: str, candidates: Sequence[Candidate], config: SearchConfiguration) -> QueryResult:
    """Strip, score and rank `candidates` for the (already trimmed) input `raw`."""
    term = strip_prefix(raw, config)
    if term != raw:
        log.debug("Stripped prefix: %r -> %r", raw, term)
    matches, truncated = rank(candidates, scorer_for(raw, term, config), config.result_limit)
    log.debug("Query %r: %d shown, %d truncated", term, len(matches), truncated)
    return QueryResult(search_term=term, matches=tuple(matches), truncated_count=truncated)
