from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from .config import ConfigManager
from .errors import ValidationError
from .persistence import PersistenceAdapter
from .storage import KeyValueStorage, StorageFactory
from .todo_store import TodoStore

app = typer.Typer(add_completion=False, help="Textual Todo")
console = Console()

T = TypeVar("T")


@dataclass
class _Options:
    storage: KeyValueStorage
    config: ConfigManager


def _configure_logging(log_file: Optional[Path], log_level: str) -> None:
    level = getattr(logging, log_level.upper(), logging.WARNING)
    if log_file is not None:
        logging.basicConfig(
            filename=str(log_file),
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        # Without a file, stay quiet so log lines do not corrupt the screen.
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])


def _run_with_store(storage: KeyValueStorage, fn: Callable[[TodoStore], T]) -> T:
    async def _main() -> T:
        store = TodoStore(PersistenceAdapter(storage))
        await store.load()
        try:
            return fn(store)
        finally:
            await store.flush()

    return asyncio.run(_main())


def _launch_ui(opts: _Options) -> None:
    try:
        from .ui.app import run_todo_app
    except Exception:
        console.print(
            "[red]Textual UI is not available. Please install 'textual' to run the todo UI.[/red]"
        )
        raise typer.Exit(1)

    store = TodoStore(PersistenceAdapter(opts.storage))
    asyncio.run(run_todo_app(store=store, config=opts.config))


@app.callback(invoke_without_command=True)  # type: ignore[misc]
def main(
    ctx: typer.Context,
    storage_path: Optional[Path] = typer.Option(
        None, help="JSON file holding the todos; defaults to the config directory"
    ),
    memory: bool = typer.Option(
        False, help="Keep todos in memory only; nothing is written to disk"
    ),
    log_file: Optional[Path] = typer.Option(None, help="Write diagnostics to this file"),
    log_level: str = typer.Option("WARNING", help="Logging level for --log-file"),
) -> None:
    """Manage a todo list; launches the terminal UI when no command is given."""
    _configure_logging(log_file, log_level)
    config = ConfigManager()
    if memory:
        storage = StorageFactory.create("memory")
    else:
        storage = StorageFactory.create("file", storage_path or config.storage_path)
    ctx.obj = _Options(storage, config)

    if ctx.invoked_subcommand is None:
        _launch_ui(ctx.obj)


@app.command()  # type: ignore[misc]
def run(ctx: typer.Context) -> None:
    """Start the terminal UI."""
    _launch_ui(ctx.obj)


@app.command("list")  # type: ignore[misc]
def list_todos(ctx: typer.Context) -> None:
    """Print the todos, newest first."""
    records = _run_with_store(ctx.obj.storage, lambda store: store.list())
    if not records:
        console.print("🌸 No Todos Yet. Add Something Cool!")
        return

    table = Table(title="Todos")
    table.add_column("#", justify="right")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Age")
    table.add_column("Done", justify="center")
    for index, record in enumerate(records, start=1):
        table.add_row(
            str(index),
            record.id,
            record.name,
            f"{record.age} yrs",
            "✓" if record.completed else "",
        )
    console.print(table)


@app.command()  # type: ignore[misc]
def add(ctx: typer.Context, name: str, age: str) -> None:
    """Add a todo."""
    try:
        record = _run_with_store(ctx.obj.storage, lambda store: store.add(name, age))
    except ValidationError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(1)
    console.print(f"✅ Todo Added Successfully! [dim]({record.id})[/dim]")


@app.command()  # type: ignore[misc]
def toggle(ctx: typer.Context, record_id: str) -> None:
    """Mark a todo done, or not done again."""
    record = _run_with_store(ctx.obj.storage, lambda store: store.toggle(record_id))
    if record is None:
        console.print(f"[yellow]No todo with id {record_id}[/yellow]")
        return
    state = "done" if record.completed else "not done"
    console.print(f"{record.name} marked {state}")


@app.command()  # type: ignore[misc]
def remove(ctx: typer.Context, record_id: str) -> None:
    """Delete a todo. Unknown ids are ignored."""
    _run_with_store(ctx.obj.storage, lambda store: store.remove(record_id))
    console.print("🗑️ Todo Deleted!")
