"""Public API for the existing-notes hint (module-level engine for CLI/Flask)."""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import List, Optional

from notehint.engine import Engine
from notehint.models import QueryResult, SearchConfiguration, load_settings
from notehint.sources import make_source

log = logging.getLogger(__name__)

_engine: Engine | None = None

def initialize(vault: str,
               settings: str | None = None,
               prefixes: list[str] | None = None,
               limit: int | None = None,
               legacy: bool = False,
               verbose: bool = False) -> Engine:
    """
    Build the module-level engine over a vault directory.
    Settings come from a JSON file (plugin data.json) when given; explicit
    arguments override the file.
    """
    global _engine
    if verbose:
        logging.basicConfig(level=logging.INFO)

    cfg = load_settings(settings) if settings else SearchConfiguration()
    overrides = {}
    if prefixes:
        overrides["prefix_tokens"] = tuple(prefixes)
    if limit is not None:
        overrides["result_limit"] = limit
    if legacy:
        overrides["fuzzy_matching"] = False
    if overrides:
        cfg = replace(cfg, **overrides)

    source = make_source(f"vault://{vault}")
    if _engine is not None:
        _engine.shutdown()
    _engine = Engine(cfg, source)
    log.info("Hint engine ready over %s (prefixes=%s)", vault, list(cfg.prefix_tokens))
    return _engine

def complete(query: str) -> Optional[QueryResult]:
    """Run the hint pipeline once, without debounce. None means "hide the hint"."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.complete(query)

def format_hint(result: Optional[QueryResult]) -> List[str]:
    """Text lines of the hint: a count header, one line per match, and a "more" line."""
    if result is None or result.total == 0:
        return []
    lines = [f'{result.total} existing note(s) found matching "{result.search_term}"']
    for m in result.matches:
        lines.append(f"  {m.candidate.display_name}  ({m.candidate.path})")
    if result.truncated_count > 0:
        lines.append(f"  ... and {result.truncated_count} more")
    return lines

def prefix_instructions(cfg: SearchConfiguration) -> List[str]:
    """Prefixed folders the user can type, e.g. '插件 ' for the plugin folder."""
    return [t.strip() + cfg.prefix_separator for t in cfg.prefix_tokens if t.strip()]
