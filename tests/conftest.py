"""Common pytest fixtures for the test suite."""

from __future__ import annotations

import pytest

from confstore import ConfigStore


@pytest.fixture
def workdir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Run the test inside ``tmp_path`` so default ``<name>.json`` files land there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def store(workdir) -> ConfigStore:
    """A store named ``settings`` with a few defaults already loaded."""
    cfg = ConfigStore("settings")
    cfg.data.update(
        {
            "port": 8080,
            "ratio": 0.5,
            "debug": False,
            "title": "demo",
            "server": {"host": "localhost", "timeout": 30},
            "hosts": ["alpha"],
            "proxy": None,
        }
    )
    return cfg
