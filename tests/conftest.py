import itertools

import pytest

from forge import config
from forge.lib import clock
from forge.lib.store import FileBackend, MemoryBackend, TaskStore


@pytest.fixture(autouse=True)
def forge_home(monkeypatch, tmp_path):
    """Isolated data directory per test instead of the real ~/.forge.

    Also clears env overrides and the cached config so tests never see the
    developer's own settings.
    """
    home = tmp_path / "forge-home"
    monkeypatch.setenv("FORGE_HOME", str(home))
    for name in ("FORGE_HOST", "FORGE_PORT", "PORT"):
        monkeypatch.delenv(name, raising=False)
    config._clear_cache()

    yield home

    config._clear_cache()


@pytest.fixture
def store():
    """In-memory task store."""
    return TaskStore(MemoryBackend())


@pytest.fixture
def file_store(tmp_path):
    return TaskStore(FileBackend(tmp_path / "data" / "tasks.json"))


@pytest.fixture
def ticking_clock(monkeypatch):
    """Clock that advances one second per reading."""
    ticks = itertools.count(1_700_000_000_000, 1000)
    monkeypatch.setattr(clock, "now_ms", lambda: next(ticks))
