import pytest

import dotstore.config


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Keep DOTSTORE_* settings from the outer environment out of the tests."""
    for name in ("DOTSTORE_PLATFORM", "DOTSTORE_POLICY", "DOTSTORE_LOG"):
        monkeypatch.delenv(name, raising=False)
    original = dotstore.config.CONFIG
    dotstore.config.CONFIG = None
    yield
    dotstore.config.CONFIG = original


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point HOME and the XDG variables at a fresh directory."""
    home = tmp_path / "home" / "user"
    home.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / ".cache"))
    monkeypatch.setenv("XDG_STATE_HOME", str(home / ".local" / "state"))
    monkeypatch.setenv("XDG_RUNTIME_DIR", str(tmp_path / "run" / "user" / "1000"))
    for name in (
        "XDG_BIN_HOME",
        "XDG_MUSIC_DIR",
        "XDG_DESKTOP_DIR",
        "XDG_DOWNLOAD_DIR",
        "XDG_DOCUMENTS_DIR",
        "XDG_PICTURES_DIR",
        "XDG_VIDEOS_DIR",
        "XDG_PUBLICSHARE_DIR",
        "XDG_TEMPLATES_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    return home
