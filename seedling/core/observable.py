from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class Observable(Generic[T]):
    """A value holder that notifies its listeners synchronously on every ``set``.

    Listeners run in subscription order before ``set`` returns. The owning state
    holder is the only writer; everyone else reads ``value`` or subscribes.
    """

    def __init__(self, initial: T, name: str = "") -> None:
        self._value = initial
        self._name = name
        self._listeners: List[Listener[T]] = []

    @property
    def value(self) -> T:
        return self._value

    @property
    def name(self) -> str:
        return self._name

    def set(self, value: T) -> None:
        self._value = value
        # Copy so listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: Listener[T], replay: bool = True) -> Callable[[], None]:
        """Register ``listener``; with ``replay`` it is called once with the current value.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)
        logger.debug("Subscribed to %s (%d listeners)", self._name or "observable", len(self._listeners))
        if replay:
            listener(self._value)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener[T]) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            logger.debug("Listener not subscribed to %s", self._name or "observable")

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def __repr__(self) -> str:
        return f"Observable({self._name!r}, {self._value!r})"
