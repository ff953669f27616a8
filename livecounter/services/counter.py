"""Counter controller service.

Owns the counter and status message state and exposes the operations the
counter screen triggers. Both values are handed out as read-only views.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject

from livecounter.domain import messages
from livecounter.domain.settings import TimingSettings
from livecounter.services.dispatcher import Dispatcher, PendingCall
from livecounter.state.observable import ObservableValue, ObservableView

logger = logging.getLogger(__name__)


class CounterController(QObject):
    """Controller for the reactive counter.

    Synchronous operations write the counter first, then the message, on
    the designated thread. The two simulated asynchronous operations return
    immediately and write later:

    - fetch_data() resumes on the designated thread and uses set()
    - update_from_background() wakes on a worker thread and uses set_deferred()

    close() cancels whatever is still pending and disposes both values.

    Example:
        >>> controller = CounterController(dispatcher)
        >>> controller.counter.subscribe(lambda n: print(f"Count: {n}"))  # Prints: "Count: 0"
        >>> controller.increment()  # Prints: "Count: 1"
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        timing: Optional[TimingSettings] = None,
        parent: Optional[QObject] = None,
    ):
        """Initialize controller.

        Args:
            dispatcher: Designated execution context
            timing: Delays for the simulated asynchronous operations
            parent: Optional Qt parent object
        """
        super().__init__(parent)
        self._dispatcher = dispatcher
        self._timing = timing or TimingSettings()

        self._counter: ObservableValue[int] = ObservableValue(0, dispatcher, self)
        self._message: ObservableValue[str] = ObservableValue("", dispatcher, self)
        self.counter: ObservableView[int] = ObservableView(self._counter)
        self.message: ObservableView[str] = ObservableView(self._message)

        self._pending: set[PendingCall] = set()
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def has_pending(self) -> bool:
        """Check if any delayed operation is still scheduled."""
        return any(call.is_pending for call in self._pending)

    def increment(self) -> None:
        """Add one to the counter."""
        self._counter.update(lambda n: n + 1)
        self._message.set(messages.INCREMENTED)

    def decrement(self) -> None:
        """Subtract one from the counter."""
        self._counter.update(lambda n: n - 1)
        self._message.set(messages.DECREMENTED)

    def reset(self) -> None:
        """Reset the counter to zero."""
        self._counter.set(0)
        self._message.set(messages.RESET)

    def fetch_data(self) -> None:
        """Simulate a network request.

        Shows the loading message now and writes the result after
        ``fetch_delay_ms`` on the designated thread.
        """
        if self._closed:
            return
        self._message.set(messages.LOADING)
        self._schedule(
            self._dispatcher.call_later(self._timing.fetch_delay_ms, self._on_fetch_complete)
        )
        logger.info(f"Fetch started (completes in {self._timing.fetch_delay_ms}ms)")

    def _on_fetch_complete(self) -> None:
        """Write the fetch result (runs on the designated thread)."""
        self._discard_fired()
        self._counter.set(messages.FETCH_RESULT)
        self._message.set(messages.fetch_complete(messages.FETCH_RESULT))
        logger.info("Fetch completed")

    def update_from_background(self) -> None:
        """Simulate a worker thread publishing a result.

        After ``background_delay_ms`` a worker thread writes both values
        through set_deferred(); subscribers are notified on the designated
        thread.
        """
        if self._closed:
            return
        self._schedule(
            self._dispatcher.call_in_background(
                self._timing.background_delay_ms, self._on_background_update
            )
        )
        logger.info(
            f"Background update scheduled in {self._timing.background_delay_ms}ms"
        )

    def _on_background_update(self) -> None:
        """Publish the background result (runs on a worker thread)."""
        self._counter.set_deferred(messages.BACKGROUND_RESULT)
        self._message.set_deferred(messages.BACKGROUND_UPDATED)
        logger.debug("Background update posted")

    def _schedule(self, call: PendingCall) -> None:
        self._discard_fired()
        self._pending.add(call)

    def _discard_fired(self) -> None:
        self._pending = {call for call in self._pending if call.is_pending}

    def close(self) -> None:
        """Cancel pending operations and dispose of the state.

        Safe to call more than once. No write or notification happens
        after this returns.
        """
        if self._closed:
            return
        self._closed = True

        cancelled = 0
        for call in self._pending:
            if call.is_pending:
                call.cancel()
                cancelled += 1
        self._pending.clear()

        self._counter.dispose()
        self._message.dispose()
        logger.info(f"Counter controller closed ({cancelled} pending operation(s) cancelled)")
