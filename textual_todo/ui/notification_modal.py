from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class NotificationModal(ModalScreen[None]):
    """Confirmation dialog mirroring the notification controller.

    The modal never closes itself: OK and Escape call ``on_dismiss`` and the
    app pops the screen once the controller reports it hidden.
    """

    BINDINGS = [Binding("escape", "dismiss_notification", "Close", show=False)]

    def __init__(self, message: str, on_dismiss: Callable[[], None]) -> None:
        super().__init__(id="notification_modal")
        self._notification_text = message
        self._on_dismiss = on_dismiss

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static(self._notification_text, id="modal_text"),
            Button("OK", id="modal_ok", variant="primary"),
            id="modal_box",
        )

    def on_mount(self) -> None:
        self.query_one("#modal_ok", Button).focus()

    @property
    def message(self) -> str:
        return self._notification_text

    def set_message(self, message: str) -> None:
        self._notification_text = message
        try:
            self.query_one("#modal_text", Static).update(message)
        except Exception:
            # Not composed yet; compose() picks up the new text.
            pass

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "modal_ok":
            event.stop()
            self._on_dismiss()

    def action_dismiss_notification(self) -> None:
        self._on_dismiss()
