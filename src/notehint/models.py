# src/notehint/models.py
"""
Data models for the existing-notes hint engine.

This module defines four small, focused data containers:

- SearchConfiguration: per-session settings, read-only to the engine.
- Candidate: one searchable note supplied by a candidate source.
- ScoredMatch: a candidate together with its tier score.
- QueryResult: the exact object handed to the presentation layer.

These classes do not contain matching logic; they only structure the data so
that stripping, scoring, and ranking remain simple and predictable.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Hashable, Mapping, Tuple

from . import config as CFG


def _clamp(value: Any, default: int) -> int:
    # absent/falsy -> default, negative -> 0
    if not value:
        return default
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return default


def _prefix_tokens(raw: Any) -> Tuple[str, ...]:
    tokens = []
    for item in raw or ():
        if isinstance(item, Mapping):
            item = item.get("prefix")
        if item is None:
            continue
        tokens.append(str(item))
    return tuple(tokens)


@dataclass(frozen=True, slots=True)
class SearchConfiguration:
    """
    Immutable settings for one input session.

    Attributes
    ----------
    prefix_separator : str
        Text expected between a prefix token and the title ("插件 A").
    prefix_tokens : Tuple[str, ...]
        Folder prefixes in priority order; the first one that matches wins.
    fuzzy_matching : bool
        True selects the three-tier scorer, False the legacy substring test.
    min_query_length : int
        Trimmed input shorter than this never triggers a query.
    debounce_ms : int
        Quiet period after the last keystroke before a query runs.
    result_limit : int
        Maximum number of matches returned in a QueryResult.
    enabled : bool
        Master switch for the hint; when off every query is hidden.
    """
    prefix_separator: str = CFG.PREFIX_SEPARATOR
    prefix_tokens: Tuple[str, ...] = ()
    fuzzy_matching: bool = CFG.FUZZY_MATCHING
    min_query_length: int = CFG.MIN_QUERY_LENGTH
    debounce_ms: int = CFG.DEBOUNCE_MS
    result_limit: int = CFG.RESULT_LIMIT
    enabled: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix_tokens", tuple(self.prefix_tokens))
        for name in ("min_query_length", "debounce_ms", "result_limit"):
            object.__setattr__(self, name, max(0, int(getattr(self, name))))

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "SearchConfiguration":
        """
        Build a configuration from a settings mapping.

        Accepts the field names above as well as the keys the host plugin
        stores in its settings file (realPrefixSeparator, prefixedFolders,
        showExistingNotesHint, existingNotesLimit, ...). Absent or falsy
        values fall back to the defaults; negative numbers are clamped to 0.
        """
        def pick(*keys: str) -> Any:
            for k in keys:
                if k in settings:
                    return settings[k]
            return None

        fuzzy = pick("fuzzy_matching", "enableFuzzyMatching")
        enabled = pick("enabled", "showExistingNotesHint")
        return cls(
            prefix_separator=pick("prefix_separator", "realPrefixSeparator") or CFG.PREFIX_SEPARATOR,
            prefix_tokens=_prefix_tokens(pick("prefix_tokens", "prefixedFolders")),
            fuzzy_matching=CFG.FUZZY_MATCHING if fuzzy is None else bool(fuzzy),
            min_query_length=_clamp(pick("min_query_length", "minQueryLength"), CFG.MIN_QUERY_LENGTH),
            debounce_ms=_clamp(pick("debounce_ms", "debounceMs"), CFG.DEBOUNCE_MS),
            result_limit=_clamp(pick("result_limit", "existingNotesLimit"), CFG.RESULT_LIMIT),
            enabled=True if enabled is None else bool(enabled),
        )


def load_settings(path: str | Path) -> SearchConfiguration:
    """Read a JSON settings file (e.g. the plugin's data.json) into a SearchConfiguration."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: settings must be a JSON object")
    return SearchConfiguration.from_settings(data)


@dataclass(frozen=True, slots=True)
class Candidate:
    """
    One searchable note.

    Attributes
    ----------
    identifier : Hashable
        Opaque handle the host uses to act on a selection (e.g. open it).
    display_name : str
        The name matched against the search term (a note's basename).
    path : str
        Vault-relative path, shown next to the name.
    """
    identifier: Hashable
    display_name: str
    path: str


@dataclass(frozen=True, slots=True)
class ScoredMatch:
    candidate: Candidate
    score: int


@dataclass(frozen=True, slots=True)
class QueryResult:
    """
    The result of one executed query.

    Attributes
    ----------
    search_term : str
        The prefix-stripped term the candidates were scored against.
    matches : Tuple[ScoredMatch, ...]
        At most result_limit matches, descending score, ties in source order.
    truncated_count : int
        How many further matches were cut off by the limit.
    """
    search_term: str
    matches: Tuple[ScoredMatch, ...]
    truncated_count: int = 0

    @property
    def total(self) -> int:
        return len(self.matches) + self.truncated_count

    def to_dict(self) -> dict:
        return {
            "search_term": self.search_term,
            "total": self.total,
            "truncated_count": self.truncated_count,
            "matches": [
                {
                    "identifier": m.candidate.identifier,
                    "display_name": m.candidate.display_name,
                    "path": m.candidate.path,
                    "score": m.score,
                }
                for m in self.matches
            ],
        }
