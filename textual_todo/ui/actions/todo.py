from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Tuple, cast

from textual.widgets import Input

from ...errors import ValidationError
from ...models import Record
from ...notifications import TODO_ADDED, TODO_DELETED, NotificationController
from ..notification_modal import NotificationModal
from ..todo_list import TodoList

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..app import TodoApp


class TodoActionsMixin:
    """Turn user intents into store mutations and confirmations."""

    def action_add_todo(self) -> None:
        app = cast("TodoApp", self)
        name_input = app.query_one("#name_input", Input)
        age_input = app.query_one("#age_input", Input)
        try:
            app.store.add(name_input.value, age_input.value)
        except ValidationError as e:
            app.notifications.show(e.message)
            focus_target = age_input if e.field == "age" else name_input
            focus_target.focus()
            return

        name_input.value = ""
        age_input.value = ""
        app.notifications.show(TODO_ADDED)
        name_input.focus()

    def action_remove_todo(self, record_id: str) -> None:
        app = cast("TodoApp", self)
        app.store.remove(record_id)
        app.notifications.show(TODO_DELETED)

    def action_toggle_todo(self, record_id: str) -> None:
        app = cast("TodoApp", self)
        app.store.toggle(record_id)

    def _render_todos(self, records: Tuple[Record, ...]) -> None:
        app = cast("TodoApp", self)
        try:
            app.query_one("#todo_list", TodoList).records = records
        except Exception as e:
            logger.error(f"Error rendering todos: {e}")

    def _sync_notification_modal(self, notifications: NotificationController) -> None:
        app = cast("TodoApp", self)
        try:
            modal = app.screen if isinstance(app.screen, NotificationModal) else None
            if notifications.visible:
                if modal is not None:
                    modal.set_message(notifications.message)
                else:
                    app.push_screen(
                        NotificationModal(notifications.message, notifications.dismiss)
                    )
            elif modal is not None:
                app.pop_screen()
        except Exception as e:
            logger.error(f"Error updating notification modal: {e}")
