# notehint/sources/vault_store.py
from __future__ import annotations
import logging
import os
from typing import Iterable, List

from .. import config as CFG
from ..models import Candidate

log = logging.getLogger(__name__)


def _iter_note_files(root: str) -> Iterable[str]:
    """Yield note file paths recursively under root, skipping excluded folders."""
    exts = tuple(e.lower() for e in CFG.NOTE_EXTS)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in CFG.EXCLUDE_DIRS)
        for fn in sorted(filenames):
            if fn.lower().endswith(exts):
                yield os.path.join(dirpath, fn)


class VaultSource:
    """
    Lists the notes of a vault directory. Every call walks the tree again,
    so a query always reflects what is on disk right now.
    """

    def __init__(self, root: str) -> None:
        root = os.path.abspath(os.path.expanduser(root))
        if not os.path.isdir(root):
            raise ValueError(f"Vault root is not a directory: {root}")
        self.root = root

    def list_candidates(self) -> List[Candidate]:
        out: List[Candidate] = []
        for path in _iter_note_files(self.root):
            rel = os.path.relpath(path, self.root).replace("\\", "/")
            stem = os.path.splitext(os.path.basename(path))[0]
            out.append(Candidate(identifier=rel, display_name=stem, path=rel))
        if CFG.VERBOSE:
            log.info("Listed %d notes under %s", len(out), self.root)
        return out
