from __future__ import annotations

from textual.app import ComposeResult
from textual.widgets import Button, Header
from textual.widgets._header import (
    HeaderClockSpace,
    HeaderIcon,
    HeaderTitle,
)


class TodoHeader(Header):
    """Header with an inline quit button."""

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield HeaderIcon().data_bind(Header.icon)
        yield HeaderTitle()
        yield HeaderClockSpace()
        yield Button(
            "✕",
            id="header_quit_button",
            tooltip="Quit (Ctrl+Q)",
            classes="quit-button header-button",
        )
