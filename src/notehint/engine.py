# notehint/engine.py
from __future__ import annotations

import enum
import logging
import threading
from functools import partial
from typing import Callable, Optional

from . import config as CFG
from .models import QueryResult, SearchConfiguration
from .search import run
from .sources.api import CandidateSource
from .timers import Scheduler, ThreadingScheduler, TimerHandle

log = logging.getLogger(__name__)

ResultListener = Callable[[Optional[QueryResult]], None]


class State(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"


class Engine:
    """
    Debounced query coordinator for one input session. Glues together:
      - the candidate source (listed fresh for every executed query),
      - the search pipeline (search.run: strip -> score -> rank),
      - a scheduler providing the cancellable debounce timer.

    Public API (used by the prompt session, CLI and Flask):
      * on_input(value): (re)arm the debounce timer with the latest value
      * complete(value): run the gated pipeline right away and return the result
      * shutdown():      cancel any armed timer; call when the session ends

    The listener receives a QueryResult, or None meaning "hide the hint".
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        config: SearchConfiguration,
        source: CandidateSource,
        on_result: Optional[ResultListener] = None,
        *,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.config = config
        self.source = source
        self.on_result = on_result
        self._scheduler = scheduler or ThreadingScheduler()
        # arm/cancel and the fire-time check share this lock; the default
        # scheduler fires on its own thread
        self._lock = threading.Lock()
        self._handle: Optional[TimerHandle] = None
        self._armed = 0  # id of the most recently armed timer
        if CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)

    @property
    def state(self) -> State:
        return State.PENDING if self._handle is not None else State.IDLE

    # ------------- input -------------

    # /* ~~~ Cancel the pending query (if any) and arm a new one for `value` ~~~ */
    def on_input(self, value: str) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                log.debug("Superseded pending query")
            self._armed += 1
            fire = partial(self._on_timer, self._armed, value)
            self._handle = self._scheduler.call_later(self.config.debounce_ms / 1000.0, fire)

    def _on_timer(self, armed: int, value: str) -> None:
        with self._lock:
            if armed != self._armed or self._handle is None:
                return  # cancelled or superseded after the timer already started
            self._handle = None
        result = self.complete(value)
        if self.on_result is not None:
            self.on_result(result)

    # ------------- query -------------

    # /* ~~~ Gate on enabled/length, then strip, score and rank fresh candidates ~~~ */
    def complete(self, value: str) -> Optional[QueryResult]:
        text = value.strip()
        cfg = self.config
        if not cfg.enabled or not text or len(text) < cfg.min_query_length:
            return None
        candidates = self.source.list_candidates()
        result = run(text, candidates, cfg)
        log.info("Query %r matched %d note(s) out of %d", result.search_term, result.total, len(candidates))
        return result

    # ------------- teardown -------------

    # /* ~~~ Cancel any armed timer; no query may fire after this ~~~ */
    def shutdown(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
            self._handle = None
            self._armed += 1
        log.debug("Engine shutdown complete")
