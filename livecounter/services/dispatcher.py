"""Execution-context dispatching.

The Dispatcher makes the designated (GUI) thread an explicit dependency.
Components ask it whether they run on the designated context, post work
onto it from any thread, and schedule delayed one-shot calls either on the
designated context or on a worker thread.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Callable, Optional

from PySide6.QtCore import QObject, QThread, QTimer, Qt, Signal

logger = logging.getLogger(__name__)


class PendingCall(ABC):
    """Handle to a one-shot delayed call.

    A pending call is scheduled until it either fires or is cancelled.
    Cancelling a call that already fired is a no-op.
    """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the call if it has not fired yet."""

    @property
    @abstractmethod
    def is_pending(self) -> bool:
        """True while the call is scheduled and not yet fired or cancelled."""


class Dispatcher:
    """Interface for the designated execution context.

    Not an ABC: QtDispatcher mixes it into QObject, whose metaclass
    cannot be combined with ABCMeta. Every method must be overridden;
    the base bodies only raise NotImplementedError.
    """

    def is_designated(self) -> bool:
        """Check whether the calling thread is the designated context."""
        raise NotImplementedError

    def post(self, fn: Callable[[], None]) -> None:
        """Run fn on the designated context. Safe to call from any thread."""
        raise NotImplementedError

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> PendingCall:
        """Run fn on the designated context after delay_ms."""
        raise NotImplementedError

    def call_in_background(self, delay_ms: int, fn: Callable[[], None]) -> PendingCall:
        """Run fn on a worker thread after delay_ms."""
        raise NotImplementedError


class _TimerCall(PendingCall):
    """Pending call backed by a single-shot QTimer."""

    def __init__(self, timer: QTimer, fn: Callable[[], None]):
        self._timer = timer
        self._fn = fn
        self._pending = True
        self._timer.timeout.connect(self._fire)

    def _fire(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._timer.deleteLater()
        self._fn()

    def cancel(self) -> None:
        if self._pending:
            self._pending = False
            self._timer.stop()
            self._timer.deleteLater()

    @property
    def is_pending(self) -> bool:
        return self._pending


class _ThreadCall(PendingCall):
    """Pending call backed by a threading.Timer worker."""

    def __init__(self, delay_ms: int, fn: Callable[[], None]):
        self._fn = fn
        self._lock = threading.Lock()
        self._pending = True
        self._timer = threading.Timer(delay_ms / 1000, self._fire)
        self._timer.daemon = True
        self._timer.start()

    def _fire(self) -> None:
        with self._lock:
            if not self._pending:
                return
            self._pending = False
        try:
            self._fn()
        except Exception:
            logger.exception("Background call failed")

    def cancel(self) -> None:
        with self._lock:
            self._pending = False
        self._timer.cancel()

    @property
    def is_pending(self) -> bool:
        with self._lock:
            return self._pending


class QtDispatcher(QObject, Dispatcher):
    """Dispatcher bound to the Qt thread the object lives in.

    Work posted from other threads travels through a queued signal
    connection, so Qt's event loop delivers it on the owning thread.

    Example:
        >>> dispatcher = QtDispatcher()
        >>> dispatcher.call_later(2000, lambda: print("two seconds later"))
    """

    _posted = Signal(object)  # Internal signal carrying callables across threads

    def __init__(self, parent: Optional[QObject] = None):
        """Initialize dispatcher on the current thread.

        Args:
            parent: Optional Qt parent object
        """
        super().__init__(parent)
        self._posted.connect(self._run_posted, Qt.QueuedConnection)

    def is_designated(self) -> bool:
        return QThread.currentThread() == self.thread()

    def post(self, fn: Callable[[], None]) -> None:
        self._posted.emit(fn)

    def _run_posted(self, fn: Callable[[], None]) -> None:
        """Run a posted callable (called on the owning thread via signal)."""
        fn()

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> PendingCall:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(delay_ms)
        call = _TimerCall(timer, fn)
        timer.start()
        logger.debug(f"Scheduled call on GUI thread in {delay_ms}ms")
        return call

    def call_in_background(self, delay_ms: int, fn: Callable[[], None]) -> PendingCall:
        logger.debug(f"Scheduled call on worker thread in {delay_ms}ms")
        return _ThreadCall(delay_ms, fn)
