from __future__ import annotations

import logging
from typing import Any, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Input

from ..config import ConfigManager
from ..notifications import NotificationController
from ..persistence import PersistenceAdapter
from ..storage import FileStorage
from ..todo_store import TodoStore
from .actions.general import GeneralActionsMixin
from .actions.theme import ThemeActionsMixin
from .actions.todo import TodoActionsMixin
from .header import TodoHeader
from .todo_list import TodoCard, TodoList

logger = logging.getLogger(__name__)


class TodoApp(
    ThemeActionsMixin,
    TodoActionsMixin,
    GeneralActionsMixin,
    App,  # type: ignore[misc]
):
    store: TodoStore
    notifications: NotificationController

    TITLE = "✨ Todo App ✨"

    CSS_PATH = "styles.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("ctrl+n", "focus_name", "New", show=True),
        Binding("home", "scroll_home", "Top", show=False),
        Binding("end", "scroll_end", "Bottom", show=False),
    ]

    def __init__(
        self,
        store: Optional[TodoStore] = None,
        notifications: Optional[NotificationController] = None,
        config: Optional[ConfigManager] = None,
    ) -> None:
        super().__init__()
        self.config = config or ConfigManager()
        self.store = store or TodoStore(
            PersistenceAdapter(FileStorage(self.config.storage_path))
        )
        self.notifications = notifications or NotificationController()

        self._unsubscribers = [
            self.store.subscribe(self._render_todos),
            self.notifications.subscribe(self._sync_notification_modal),
        ]

        self._apply_saved_theme()

    def compose(self) -> ComposeResult:
        yield TodoHeader(id="hdr")
        yield Vertical(
            Input(placeholder="Enter your Name", id="name_input"),
            Input(placeholder="Enter your Age", id="age_input"),
            Horizontal(
                Button("+ Add Todo", id="add_button", variant="primary"),
                id="add_row",
            ),
            id="input_section",
        )
        yield TodoList(id="todo_list")
        yield Footer(id="footer")

    async def on_mount(self) -> None:
        try:
            self.query_one("#name_input", Input).focus()
        except Exception:
            pass
        await self.store.load()

    async def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        await self.store.flush()

    async def action_quit(self) -> None:
        await self.store.flush()
        self.exit()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add_button":
            event.stop()
            self.action_add_todo()
        elif event.button.id == "header_quit_button":
            event.stop()
            await self.action_quit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "name_input":
            self.query_one("#age_input", Input).focus()
        elif event.input.id == "age_input":
            self.action_add_todo()

    def on_todo_card_toggled(self, message: TodoCard.Toggled) -> None:
        try:
            self.action_toggle_todo(message.record_id)
        except Exception as exc:
            logger.error(f"Unexpected error toggling todo: {exc}")

    def on_todo_card_deleted(self, message: TodoCard.Deleted) -> None:
        try:
            self.action_remove_todo(message.record_id)
        except Exception as exc:
            logger.error(f"Unexpected error deleting todo: {exc}")


async def run_todo_app(**kwargs: Any) -> None:
    app = TodoApp(**kwargs)
    await app.run_async()
