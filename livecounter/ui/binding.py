"""Lifecycle-bound observation helpers for widgets."""

from typing import Callable, Optional, TypeVar

from PySide6.QtCore import QObject

from livecounter.state.observable import ObservableView, Subscription

T = TypeVar("T")


def bind(
    owner: QObject,
    source: ObservableView[T],
    callback: Callable[[T], None],
    fallback: Optional[T] = None,
) -> Subscription:
    """Observe a value for as long as a Qt object is alive.

    The callback receives the current value right away (``fallback`` when
    the value is None) and every later value. The subscription is removed
    when ``owner`` is destroyed.

    Args:
        owner: Object whose lifetime bounds the subscription
        source: Value to observe
        callback: Function called with each value
        fallback: Value delivered in place of None

    Returns:
        The subscription, for callers that want to unbind early

    Example:
        >>> bind(label, controller.message, label.setText, fallback="")
    """

    def deliver(value: Optional[T]) -> None:
        callback(fallback if value is None else value)

    subscription = source.subscribe(deliver)
    owner.destroyed.connect(lambda *_: source.unsubscribe(subscription))
    return subscription
