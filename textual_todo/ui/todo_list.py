from __future__ import annotations

from typing import Tuple

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Label, Static

from ..models import Record

EMPTY_MESSAGE = "🌸 No Todos Yet. Add Something Cool!"
PALETTE_SIZE = 5


class TodoCard(Horizontal):
    """One row of the list: index, name, age badge and a delete button."""

    can_focus = True

    BINDINGS = [
        Binding("enter,space", "toggle", "Done", show=True),
        Binding("delete", "remove", "Delete", show=True),
    ]

    class Toggled(Message):
        def __init__(self, record_id: str) -> None:
            self.record_id = record_id
            super().__init__()

    class Deleted(Message):
        def __init__(self, record_id: str) -> None:
            self.record_id = record_id
            super().__init__()

    def __init__(self, record: Record, index: int) -> None:
        classes = f"todo-card palette-{index % PALETTE_SIZE}"
        if record.completed:
            classes += " completed"
        super().__init__(classes=classes)
        self.record = record
        self.index = index

    @property
    def record_id(self) -> str:
        return self.record.id

    def compose(self) -> ComposeResult:
        yield Label(f"{self.index + 1}.", classes="todo-index")
        yield Label(self.record.name, classes="todo-name")
        yield Label(f"{self.record.age} yrs", classes="todo-age")
        yield Button("🗑️", classes="delete-button", tooltip="Delete")

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.action_toggle()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("delete-button"):
            event.stop()
            self.action_remove()

    def action_toggle(self) -> None:
        self.post_message(self.Toggled(self.record_id))

    def action_remove(self) -> None:
        self.post_message(self.Deleted(self.record_id))


class TodoList(VerticalScroll):
    """Scrollable list rebuilt from a store snapshot."""

    records: reactive[Tuple[Record, ...]] = reactive((), recompose=True)

    def compose(self) -> ComposeResult:
        if not self.records:
            yield Static(EMPTY_MESSAGE, id="empty_message")
            return
        for index, record in enumerate(self.records):
            yield TodoCard(record, index)

    async def recompose(self) -> None:
        """Rebuild the cards, keeping keyboard focus on the same todo."""
        focused = self.screen.focused
        record_id = focused.record_id if isinstance(focused, TodoCard) else None
        await super().recompose()
        if record_id is not None:
            card = self.card_for(record_id)
            if card is not None:
                card.focus()

    def watch_records(self, records: Tuple[Record, ...]) -> None:
        completed_count = sum(1 for record in records if record.completed)
        self.border_title = f"Todos ({completed_count}/{len(records)} complete)"

    def card_for(self, record_id: str) -> TodoCard | None:
        for card in self.query(TodoCard):
            if card.record_id == record_id:
                return card
        return None
