import logging
import logging.handlers

import pytest

from confstore import ConfigStore, configure_logging
from confstore import log_setup


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(log_setup, "_handler", None)
    yield
    if log_setup._handler is not None:
        root.removeHandler(log_setup._handler)
        log_setup._handler.close()
    root.setLevel(level)


def test_file_handler_receives_store_messages(tmp_path):
    log_dir = tmp_path / "logs"
    handler = configure_logging("DEBUG", log_dir=log_dir)

    assert isinstance(handler, logging.handlers.RotatingFileHandler)
    assert handler.maxBytes == 10 * 1024 * 1024

    store = ConfigStore("logged")
    store.save(tmp_path / "logged.json")
    handler.flush()

    text = (log_dir / log_setup.LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "DEBUG - logged saved to" in text


def test_repeated_calls_replace_handler(tmp_path):
    first = configure_logging(log_dir=tmp_path)
    second = configure_logging(log_dir=tmp_path)

    handlers = logging.getLogger().handlers
    assert second in handlers
    assert first not in handlers


def test_stream_handler_without_directory():
    handler = configure_logging("warning")

    assert type(handler) is logging.StreamHandler
    assert logging.getLogger().level == logging.WARNING
