from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from ..app import TodoApp

logger = logging.getLogger(__name__)


class ThemeActionsMixin:
    """Persist theme changes so the next launch looks the same."""

    def _apply_saved_theme(self) -> None:
        app = cast("TodoApp", self)
        saved_theme = app.config.get("theme")
        if not saved_theme:
            return
        try:
            app.theme = saved_theme
        except Exception as e:
            logger.warning(f"Failed to apply saved theme '{saved_theme}': {e}")

    def watch_theme(self, theme: str) -> None:  # type: ignore[override]
        try:
            cast("TodoApp", self).config.set("theme", theme)
        except Exception as e:
            logger.error(f"Failed to persist theme in watch_theme: {e}")
