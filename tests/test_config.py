from pathlib import Path

from textual_todo.config import ConfigManager


def test_config_manager_creation(tmp_path, monkeypatch):
    """ConfigManager creates its directory under XDG_CONFIG_HOME."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    config = ConfigManager("test-app")
    assert config.config_file_path.parent.exists()
    assert config.config_file_path.parent == tmp_path / "test-app"


def test_config_get_set_and_persistence():
    config = ConfigManager("test-app")
    assert config.get("nonexistent", "default") == "default"

    config.set("theme", "textual-light")
    assert config.get("theme") == "textual-light"

    # A second instance reads the same file
    assert ConfigManager("test-app").get("theme") == "textual-light"


def test_config_update_and_get_all():
    config = ConfigManager("test-app")
    config.update({"key1": "value1", "key2": 2})

    all_config = config.get_all()
    assert all_config == {"key1": "value1", "key2": 2}
    all_config["key1"] = "changed"
    assert config.get("key1") == "value1"


def test_corrupt_config_falls_back_to_defaults():
    config = ConfigManager("test-app")
    config.config_file_path.write_text("{oops", encoding="utf-8")
    assert ConfigManager("test-app").get_all() == {}


def test_storage_path_default_and_override(tmp_path):
    config = ConfigManager("test-app")
    assert config.storage_path == config.config_file_path.parent / "storage.json"

    config.set("storage_path", str(tmp_path / "elsewhere.json"))
    assert config.storage_path == Path(tmp_path / "elsewhere.json")
