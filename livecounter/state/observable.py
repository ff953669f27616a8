"""Reactive value container with Qt signal integration.

ObservableValue holds a single value, notifies subscribers when it is
written, and offers two write paths: a synchronous one for the designated
(GUI) thread and a deferred one that any thread may use.
"""

import logging
import threading
from typing import Callable, Generic, Optional, TypeVar

from PySide6.QtCore import QObject, Signal

from livecounter.services.dispatcher import Dispatcher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ThreadAffinityError(AssertionError):
    """Raised when a synchronous write happens off the designated thread."""


class Subscription:
    """Opaque handle returned by ObservableValue.subscribe()."""

    def __init__(self, source: "ObservableValue", callback: Callable[[object], None]):
        self._source = source
        self._callback = callback
        self._active = True

    @property
    def is_active(self) -> bool:
        """Check if the subscription still receives notifications."""
        return self._active

    def dispose(self) -> None:
        """Stop receiving notifications (same as source.unsubscribe(self))."""
        self._source.unsubscribe(self)


class ObservableValue(QObject, Generic[T]):
    """Reactive value container with two write paths.

    Subscribers are called in attachment order on every write, then the
    ``changed`` signal is emitted for Qt-native consumers. Unlike a plain
    setter, writing an equal value still notifies.

    ``set()`` must run on the dispatcher's designated thread and notifies
    synchronously. ``set_deferred()`` may run on any thread: the value is
    stored immediately and one notification is posted to the designated
    thread. Deferred writes issued before that notification runs are
    coalesced, so subscribers only see the latest value.

    Example:
        >>> counter = ObservableValue(0, dispatcher)
        >>> sub = counter.subscribe(lambda val: print(f"Value: {val}"))  # Prints: "Value: 0"
        >>> counter.set(5)  # Prints: "Value: 5"
        >>> counter.unsubscribe(sub)
    """

    changed = Signal(object)  # Emitted after subscribers on every notification

    def __init__(self, initial: T, dispatcher: Dispatcher, parent: Optional[QObject] = None):
        """Initialize observable with initial value.

        Args:
            initial: Initial value
            dispatcher: Designated execution context for notifications
            parent: Optional Qt parent object
        """
        super().__init__(parent)
        self._value = initial
        self._dispatcher = dispatcher
        self._lock = threading.Lock()
        self._subscriptions: list[Subscription] = []
        self._notify_posted = False
        self._disposed = False

    @property
    def value(self) -> T:
        """Get current value."""
        with self._lock:
            return self._value

    def get(self) -> T:
        """Get current value."""
        return self.value

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def set(self, new_value: T) -> None:
        """Set new value and notify subscribers synchronously.

        Args:
            new_value: New value to set

        Raises:
            ThreadAffinityError: If called off the designated thread,
                including after dispose()
        """
        if not self._dispatcher.is_designated():
            raise ThreadAffinityError(
                "ObservableValue.set() called off the designated thread; "
                "use set_deferred() from worker threads"
            )
        if self._disposed:
            logger.debug(f"Ignoring write of {new_value!r} to disposed observable")
            return
        with self._lock:
            self._value = new_value
        self._notify(new_value)

    def update(self, fn: Callable[[T], T]) -> None:
        """Update value using a function.

        Args:
            fn: Function that takes current value and returns new value

        Example:
            >>> counter = ObservableValue(0, dispatcher)
            >>> counter.update(lambda x: x + 1)
            >>> counter.value  # 1
        """
        self.set(fn(self.value))

    def set_deferred(self, new_value: T) -> None:
        """Store a value from any thread and post the notification.

        Args:
            new_value: New value to set

        Note:
            Only the latest value is guaranteed to reach subscribers when
            several deferred writes land before the posted notification runs.
        """
        with self._lock:
            if self._disposed:
                logger.debug(f"Ignoring deferred write of {new_value!r} to disposed observable")
                return
            self._value = new_value
            if self._notify_posted:
                return
            self._notify_posted = True
        self._dispatcher.post(self._deliver_deferred)

    def _deliver_deferred(self) -> None:
        """Notify with the latest value (runs on the designated thread)."""
        with self._lock:
            self._notify_posted = False
            if self._disposed:
                return
            value = self._value
        self._notify(value)

    def _notify(self, value: T) -> None:
        for subscription in list(self._subscriptions):
            if subscription.is_active:
                subscription._callback(value)
        self.changed.emit(value)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        """Subscribe to value changes.

        The callback is invoked once immediately with the current value.
        If that first call raises, the subscription is removed and the
        exception propagates.

        Args:
            callback: Function called with the value on every write

        Returns:
            Subscription handle to pass to unsubscribe()
        """
        subscription = Subscription(self, callback)
        if self._disposed:
            subscription._active = False
            return subscription
        self._subscriptions.append(subscription)
        try:
            callback(self.value)
        except BaseException:
            # Caller never receives the handle
            self.unsubscribe(subscription)
            raise
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription. No-op if it was already removed."""
        if not subscription._active:
            return
        subscription._active = False
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def dispose(self) -> None:
        """Detach all subscribers and ignore any further writes.

        A deferred notification that is already queued is dropped.
        """
        with self._lock:
            self._disposed = True
        for subscription in self._subscriptions:
            subscription._active = False
        self._subscriptions.clear()


class ObservableView(Generic[T]):
    """Read-only facade over an ObservableValue.

    Owners keep the ObservableValue private and hand out views, so other
    components can read and subscribe but never write.
    """

    def __init__(self, source: ObservableValue[T]):
        self._source = source

    @property
    def value(self) -> T:
        return self._source.value

    def get(self) -> T:
        return self._source.get()

    @property
    def changed(self):
        """The source's changed signal."""
        return self._source.changed

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        return self._source.subscribe(callback)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._source.unsubscribe(subscription)
