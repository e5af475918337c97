# src/e2e/conftest.py
import pytest

from notehint.models import Candidate


class FakeTimer:
    def __init__(self, due_ms: int, fn):
        self.due_ms = due_ms
        self.fn = fn
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """
    Manual clock for debounce tests: nothing fires until advance_to(ms).
    Delays are tracked in whole milliseconds so 100 + 200 lands exactly on 300.
    """
    def __init__(self):
        self.now_ms = 0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay, fn):
        t = FakeTimer(self.now_ms + round(delay * 1000), fn)
        self.timers.append(t)
        return t

    def pending(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and t.fn is not None]

    def advance_to(self, ms: int) -> None:
        for t in sorted(self.pending(), key=lambda t: t.due_ms):
            if t.due_ms > ms:
                break
            if t.cancelled or t.fn is None:
                continue
            self.now_ms = t.due_ms
            fn, t.fn = t.fn, None
            fn()
        self.now_ms = ms


class CountingSource:
    """Candidate source that records how often it was listed."""
    def __init__(self, names):
        self.names = list(names)
        self.calls = 0

    def list_candidates(self):
        self.calls += 1
        return [Candidate(identifier=i, display_name=n, path=f"{n}.md") for i, n in enumerate(self.names)]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def make_counting_source():
    return CountingSource
