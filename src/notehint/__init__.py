"""
Existing-Notes Hint Module

This module answers "does a similar note already exist?" while a user types a
new note title. It strips a configured folder prefix from the input, scores
every note name against the remaining term, and returns the best few matches.

The module is designed with a clean separation of concerns:
- Prefix stripping of the raw input
- Tiered match scoring (phrase > ordered words > unordered words)
- Debounced query coordination for keystroke-driven input
- Candidate sources (in-memory list, note vault on disk)

Main Objects:
    SearchConfiguration: per-session settings (prefixes, limits, debounce)
    Engine: debounced coordinator; on_input(value), complete(value), shutdown()
    PromptSession: submit / select / close lifecycle around an Engine

Example Usage:
    from notehint import Engine, SearchConfiguration, make_source

    cfg = SearchConfiguration(prefix_tokens=("插件",), result_limit=3)
    engine = Engine(cfg, make_source("vault:///path/to/vault"))

    result = engine.complete("插件 Project")
    for match in result.matches:
        print(f"{match.score}: {match.candidate.display_name}")
"""

# src/notehint/__init__.py
from .models import Candidate, QueryResult, ScoredMatch, SearchConfiguration, load_settings
from .normalize import strip_prefix
from .search import score
from .engine import Engine, State
from .session import PromptSession
from .sources import CandidateSource, make_source

__version__ = "1.0.0"
__all__ = [
    "Candidate",
    "QueryResult",
    "ScoredMatch",
    "SearchConfiguration",
    "load_settings",
    "strip_prefix",
    "score",
    "Engine",
    "State",
    "PromptSession",
    "CandidateSource",
    "make_source",
]
