"""Synchronous change notification."""

from __future__ import annotations

from collections.abc import Callable

type Listener = Callable[[], None]


class ChangeNotifier:
    """Holds listeners and calls them, in registration order, after a mutation."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Remove the first registration of *listener*; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def notify_listeners(self) -> None:
        # Snapshot so a listener may unsubscribe while being notified.
        for listener in tuple(self._listeners):
            listener()
