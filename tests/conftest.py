"""Pytest fixtures and configuration."""

import os
from collections import deque

import pytest

from livecounter.app import ApplicationContext
from livecounter.services.counter import CounterController
from livecounter.services.dispatcher import Dispatcher, PendingCall
from livecounter.state.persistence import SettingsStore

# Headless test runs
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class ManualCall(PendingCall):
    """Pending call driven by ManualDispatcher's virtual clock."""

    def __init__(self, due_ms: int, seq: int, fn, background: bool):
        self.due_ms = due_ms
        self.seq = seq
        self.fn = fn
        self.background = background
        self._pending = True

    def cancel(self) -> None:
        self._pending = False

    @property
    def is_pending(self) -> bool:
        return self._pending


class ManualDispatcher(Dispatcher):
    """Deterministic dispatcher with a virtual clock.

    Posted callables queue until run_posted() or advance(). Background
    calls run with is_designated() reporting False, like a worker thread.
    """

    def __init__(self):
        self.now_ms = 0
        self._seq = 0
        self._calls: list[ManualCall] = []
        self._posted = deque()
        self._designated = True

    def is_designated(self) -> bool:
        return self._designated

    def post(self, fn) -> None:
        self._posted.append(fn)

    def call_later(self, delay_ms: int, fn) -> PendingCall:
        return self._add(delay_ms, fn, background=False)

    def call_in_background(self, delay_ms: int, fn) -> PendingCall:
        return self._add(delay_ms, fn, background=True)

    def _add(self, delay_ms, fn, background) -> ManualCall:
        self._seq += 1
        call = ManualCall(self.now_ms + delay_ms, self._seq, fn, background)
        self._calls.append(call)
        return call

    @property
    def posted_count(self) -> int:
        return len(self._posted)

    @property
    def scheduled_count(self) -> int:
        return sum(1 for call in self._calls if call.is_pending)

    def run_posted(self) -> None:
        """Run everything posted to the designated context."""
        while self._posted:
            self._posted.popleft()()

    def run_as_worker(self, fn) -> None:
        """Run fn as if on a worker thread."""
        self._designated = False
        try:
            fn()
        finally:
            self._designated = True

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing due calls in order."""
        target = self.now_ms + ms
        while True:
            due = [c for c in self._calls if c.is_pending and c.due_ms <= target]
            if not due:
                break
            call = min(due, key=lambda c: (c.due_ms, c.seq))
            self.now_ms = call.due_ms
            call._pending = False
            if call.background:
                self.run_as_worker(call.fn)
            else:
                call.fn()
            self.run_posted()
        self.now_ms = target
        self.run_posted()


@pytest.fixture
def dispatcher(qapp):
    """Manual dispatcher (qapp ensures a Qt application exists)."""
    return ManualDispatcher()


@pytest.fixture
def controller(dispatcher):
    """Counter controller on the manual dispatcher with default timing."""
    ctrl = CounterController(dispatcher)
    yield ctrl
    ctrl.close()


@pytest.fixture
def recorder():
    """Factory for callbacks that record the values they receive."""

    def _make():
        received = []
        return received, received.append

    return _make


@pytest.fixture
def context(tmp_path, dispatcher):
    """Application context with isolated settings and manual dispatcher."""
    ctx = ApplicationContext(SettingsStore(tmp_path / "settings.json"), dispatcher)
    yield ctx
    ctx.shutdown()
