"""Prompt session: the input lifecycle around one Engine (open -> type -> submit/select/close)."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .engine import Engine
from .models import Candidate, ScoredMatch

log = logging.getLogger(__name__)


class PromptSession:
    """
    Drives an Engine from host input events.

    on_submit : called with the raw input value when the user confirms a title.
    on_open   : called with the Candidate when the user picks an existing note.
    on_cancel : called once if the session closes without submit or selection.
    """

    def __init__(
        self,
        engine: Engine,
        *,
        on_submit: Optional[Callable[[str], None]] = None,
        on_open: Optional[Callable[[Candidate], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
    ) -> None:
        self.engine = engine
        self._on_submit = on_submit
        self._on_open = on_open
        self._on_cancel = on_cancel
        self.submitted = False
        self.closed = False

    def on_input(self, value: str) -> None:
        if self.closed:
            return
        self.engine.on_input(value)

    def on_submit(self, value: str) -> None:
        if self.closed:
            return
        self.submitted = True
        if self._on_submit is not None:
            self._on_submit(value)
        self.on_close()

    def select(self, match: ScoredMatch) -> None:
        if self.closed:
            return
        self.submitted = True
        log.info("Opening existing note %s", match.candidate.path)
        if self._on_open is not None:
            self._on_open(match.candidate)
        self.on_close()

    def on_close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.engine.shutdown()
        if not self.submitted and self._on_cancel is not None:
            self._on_cancel()
