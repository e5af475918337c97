# notehint/sources/memory_store.py
from __future__ import annotations
from typing import Iterable, List

from ..models import Candidate


class MemorySource:
    """Fixed in-memory candidate list (useful for tests or embedding)."""

    def __init__(self, candidates: Iterable[Candidate] = ()) -> None:
        self._rows: List[Candidate] = list(candidates)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "MemorySource":
        return cls(Candidate(identifier=f"{n}.md", display_name=n, path=f"{n}.md") for n in names)

    def add(self, c: Candidate) -> None:
        self._rows.append(c)

    def list_candidates(self) -> List[Candidate]:
        # a copy, so a running query sees a stable snapshot
        return list(self._rows)
