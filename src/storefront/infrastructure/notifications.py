"""Auto-clearing notification, backed by a cancellable ``threading.Timer``.

Posting a message cancels the pending clear and arms a new one. Each
clear carries the generation it was armed for, so a timer that fires
late (already running when it was cancelled) cannot erase a newer
message.
"""

from __future__ import annotations

import threading
from typing import Callable

from storefront.application.notifier import Notifier

DEFAULT_CLEAR_AFTER = 2.0

Listener = Callable[[str], None]


class TimedNotifier(Notifier):

    def __init__(
        self,
        clear_after: float = DEFAULT_CLEAR_AFTER,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ) -> None:
        self._clear_after = clear_after
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._message = ""
        self._generation = 0
        self._timer: threading.Timer | None = None
        self._listeners: list[Listener] = []

    @property
    def current(self) -> str:
        with self._lock:
            return self._message

    def subscribe(self, listener: Listener) -> None:
        """Call *listener* with the new message on every post and clear."""
        self._listeners.append(listener)

    def post(self, message: str) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._message = message
            timer = self._timer_factory(self._clear_after, self._clear, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
        timer.start()
        self._emit(message)

    def close(self) -> None:
        """Cancel the pending clear, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _clear(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._message = ""
            self._timer = None
        self._emit("")

    def _emit(self, message: str) -> None:
        for listener in self._listeners:
            listener(message)
