import json
import os
from pathlib import Path

import pytest

from textual_todo.persistence import PersistenceAdapter
from textual_todo.storage import MemoryStorage
from textual_todo.todo_store import TodoStore
from textual_todo.ui.app import TodoApp


def _app() -> TodoApp:
    return TodoApp(store=TodoStore(PersistenceAdapter(MemoryStorage())))


@pytest.mark.asyncio
async def test_theme_change_persists_to_xdg_config() -> None:
    app = _app()
    async with app.run_test() as pilot:
        app.theme = "textual-light"
        await pilot.pause()

    config_path = Path(os.environ["XDG_CONFIG_HOME"]) / "textual-todo" / "config.json"
    assert config_path.exists(), f"Expected config at {config_path}"
    data = json.loads(config_path.read_text())
    assert data.get("theme") == "textual-light"

    app2 = _app()
    assert app2.theme == "textual-light"
