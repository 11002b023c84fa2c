from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from textual.widgets import Input

from ..todo_list import TodoList

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..app import TodoApp


class GeneralActionsMixin:
    """Navigation shortcuts."""

    def action_focus_name(self) -> None:
        app = cast("TodoApp", self)
        try:
            app.query_one("#name_input", Input).focus()
        except Exception as e:
            logger.error(f"Error focusing name input: {e}")

    def action_scroll_home(self) -> None:
        app = cast("TodoApp", self)
        try:
            app.query_one("#todo_list", TodoList).scroll_home(animate=True)
        except Exception as e:
            logger.error(f"Error scrolling to home: {e}")

    def action_scroll_end(self) -> None:
        app = cast("TodoApp", self)
        try:
            app.query_one("#todo_list", TodoList).scroll_end(animate=True)
        except Exception as e:
            logger.error(f"Error scrolling to end: {e}")
