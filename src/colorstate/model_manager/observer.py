"""Thread-safe observer list used by the picker service."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Holds observers of one protocol type and calls them back by method name.

    The lock guards the list only; callbacks run on a snapshot with the lock
    released, so an observer may register or unregister from its callback.
    A callback that raises is logged and the remaining observers still run.

    Example:
        ```python
        observers = ObserverManager[ColorObserver](observer_type_name="color")
        observers.register(panel)
        observers.notify("on_color_event", ColorEvent.COLOR_CHANGED, state=state)
        ```
    """

    def __init__(self, lock: Lock | None = None, observer_type_name: str = "observer"):
        self._observers: list[T] = []
        self._lock = lock or Lock()
        self._kind = observer_type_name

    def register(self, observer: T) -> None:
        """Add an observer; registering the same observer twice has no effect."""
        with self._lock:
            if observer in self._observers:
                return
            self._observers.append(observer)
        logger.debug(f"Registered {self._kind} observer {observer!r}")

    def unregister(self, observer: T) -> None:
        """Remove an observer; unknown observers are logged and ignored."""
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                logger.warning(f"Cannot unregister unknown {self._kind} observer {observer!r}")
                return
        logger.debug(f"Unregistered {self._kind} observer {observer!r}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Call ``callback_name(*args, **kwargs)`` on every registered observer."""
        with self._lock:
            snapshot = tuple(self._observers)

        for observer in snapshot:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._kind} observer {observer!r} has no method '{callback_name}'")
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{self._kind} observer {observer!r} failed in {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Drop every observer."""
        with self._lock:
            dropped = len(self._observers)
            self._observers.clear()
        if dropped:
            logger.debug(f"Cleared {dropped} {self._kind} observer(s)")

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def __bool__(self) -> bool:
        return len(self) > 0
