from __future__ import annotations

import json
from unittest.mock import patch

from typer.testing import CliRunner

from textual_todo import cli
from textual_todo.persistence import STORAGE_KEY, decode_records


def _records(path):
    return decode_records(json.loads(path.read_text(encoding="utf-8"))[STORAGE_KEY])


def test_add_list_toggle_remove_round_trip(tmp_path) -> None:
    storage = tmp_path / "todos.json"
    runner = CliRunner()
    base = ["--storage-path", str(storage)]

    result = runner.invoke(cli.app, base + ["add", "Sam", "30"])
    assert result.exit_code == 0, result.output
    assert "Todo Added Successfully" in result.output
    result = runner.invoke(cli.app, base + ["add", "Ada", "36"])
    assert result.exit_code == 0, result.output

    records = _records(storage)
    assert [r.name for r in records] == ["Ada", "Sam"]
    sam = records[1]

    result = runner.invoke(cli.app, base + ["toggle", sam.id])
    assert result.exit_code == 0, result.output
    assert "Sam marked done" in result.output
    assert _records(storage)[1].completed is True

    result = runner.invoke(cli.app, base + ["list"])
    assert result.exit_code == 0, result.output
    assert "Ada" in result.output and "Sam" in result.output
    assert "30 yrs" in result.output

    result = runner.invoke(cli.app, base + ["remove", sam.id])
    assert result.exit_code == 0, result.output
    assert [r.name for r in _records(storage)] == ["Ada"]


def test_add_validation_error_exits_1(tmp_path) -> None:
    storage = tmp_path / "todos.json"
    result = CliRunner().invoke(
        cli.app, ["--storage-path", str(storage), "add", "Sam", ""]
    )
    assert result.exit_code == 1
    assert "Please Enter an Age" in result.output
    assert not storage.exists()


def test_unknown_ids_are_not_errors(tmp_path) -> None:
    base = ["--storage-path", str(tmp_path / "todos.json")]
    runner = CliRunner()

    result = runner.invoke(cli.app, base + ["toggle", "nope"])
    assert result.exit_code == 0
    assert "No todo with id nope" in result.output

    result = runner.invoke(cli.app, base + ["remove", "nope"])
    assert result.exit_code == 0


def test_list_empty_and_corrupt_storage(tmp_path) -> None:
    storage = tmp_path / "todos.json"
    storage.write_text(json.dumps({STORAGE_KEY: "[{broken"}), encoding="utf-8")
    result = CliRunner().invoke(cli.app, ["--storage-path", str(storage), "list"])
    assert result.exit_code == 0
    assert "No Todos Yet" in result.output


def test_memory_storage_leaves_no_files(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(cli.app, ["--memory", "add", "Sam", "30"])
    assert result.exit_code == 0, result.output
    assert list(tmp_path.iterdir()) == [tmp_path / "xdg-config"]


def test_no_command_launches_ui(tmp_path) -> None:
    storage = tmp_path / "todos.json"
    with patch.object(cli, "_launch_ui") as launch:
        result = CliRunner().invoke(cli.app, ["--storage-path", str(storage)])
    assert result.exit_code == 0, result.output
    launch.assert_called_once()
    opts = launch.call_args.args[0]
    assert opts.storage.path == storage
