# notehint/sources/api.py
from __future__ import annotations
from typing import List, Optional, Protocol, Sequence

from ..models import Candidate


class CandidateSource(Protocol):
    # listed once per executed query, never cached by the engine
    def list_candidates(self) -> List[Candidate]: ...


def make_source(dsn: str, *, candidates: Optional[Sequence[Candidate]] = None) -> CandidateSource:
    """
    Factory:
      - vault:///abs/path -> VaultSource (walks the vault for notes on every call)
      - memory://         -> MemorySource (fixed list, injected via `candidates`)
    """
    if dsn.startswith("vault://"):
        from .vault_store import VaultSource
        return VaultSource(dsn.removeprefix("vault://"))

    if dsn.startswith("memory://"):
        from .memory_store import MemorySource
        return MemorySource(candidates or ())

    raise ValueError(f"Unsupported source DSN: {dsn}")
