import os
import sys

import pytest

# Ensure repository root is on sys.path when running under pre-commit
REPO_ROOT = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture(autouse=True)
def _isolate_config_home(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config and todo files out of the real home directory."""
    config_home = tmp_path / "xdg-config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
