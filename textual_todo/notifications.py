from __future__ import annotations

import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

TODO_ADDED = "✅ Todo Added Successfully!"
TODO_DELETED = "🗑️ Todo Deleted!"

NotificationListener = Callable[["NotificationController"], None]


class NotificationController:
    """Single-slot confirmation message with a visibility flag.

    There is no queue: showing a message while another is visible replaces it.
    """

    def __init__(self) -> None:
        self.message = ""
        self.visible = False
        self._listeners: List[NotificationListener] = []

    def show(self, message: str) -> None:
        self.message = message
        self.visible = True
        self._notify()

    def dismiss(self) -> None:
        """Hide the message. The text is kept until the next ``show``."""
        if not self.visible:
            return
        self.visible = False
        self._notify()

    def subscribe(self, listener: NotificationListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.error(f"Notification listener failed: {e}")
