"""Shared horizontal scroll offset for the header row and the hour grid."""

from __future__ import annotations

from typing import Callable

OffsetListener = Callable[[float], None]


class ScrollSyncCoordinator:
    def __init__(self) -> None:
        self.offset = 0.0
        self.is_internal_update = False
        self._listeners: dict[str, OffsetListener] = {}

    def subscribe(self, view_id: str, listener: OffsetListener) -> None:
        self._listeners[view_id] = listener

    def unsubscribe(self, view_id: str) -> None:
        self._listeners.pop(view_id, None)

    def publish(self, view_id: str, offset: float) -> bool:
        """Record a user scroll from ``view_id`` and mirror it to the other views.

        Returns False when the call was an echo of a programmatic scroll.
        """
        if self.is_internal_update:
            return False
        self.offset = offset
        self.is_internal_update = True
        try:
            for other_id, listener in list(self._listeners.items()):
                if other_id != view_id:
                    listener(offset)
        finally:
            self.is_internal_update = False
        return True
