"""
Rendering sink - where built alerts become visible.
"""

import threading
from typing import Optional, Protocol

from pushdispatch.models.alert import AlertDescription


class NotificationSink(Protocol):
    def notify(self, signature: int, alert: AlertDescription) -> None: ...


class NotificationTray:
    """In-memory tray keyed by signature. Re-notifying a signature replaces its alert."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._active: dict[int, AlertDescription] = {}
        self._history: list[tuple[int, AlertDescription]] = []

    def notify(self, signature: int, alert: AlertDescription) -> None:
        with self._lock:
            self._active[signature] = alert
            self._history.append((signature, alert))

    def cancel(self, signature: int) -> None:
        with self._lock:
            self._active.pop(signature, None)

    def get(self, signature: int) -> Optional[AlertDescription]:
        with self._lock:
            return self._active.get(signature)

    def active(self) -> dict[int, AlertDescription]:
        with self._lock:
            return dict(self._active)

    @property
    def history(self) -> list[tuple[int, AlertDescription]]:
        """Every notify call, in order."""
        with self._lock:
            return list(self._history)

    def __len__(self) -> int:
        with self._lock:
            return len(self._active)
