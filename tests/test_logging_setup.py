# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from optodo.logging_setup import _ConsoleNoiseFilter, level_from_name, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    saved_level = root.level
    yield root
    for h in list(root.handlers):
        ours = isinstance(h, logging.FileHandler) or any(
            isinstance(f, _ConsoleNoiseFilter) for f in h.filters
        )
        if ours:
            root.removeHandler(h)
            h.close()
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_setup_installs_console_and_file_handlers(restore_root_logging, tmp_path: Path) -> None:
    root = restore_root_logging
    log_file = setup_logging(log_dir=tmp_path, console_level=logging.INFO)

    assert log_file == tmp_path / "optodo.log"
    assert log_file.exists()

    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    console = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert len(console) == 1
    assert isinstance(console[0], logging.StreamHandler)
    assert console[0].level == logging.INFO
    assert any(isinstance(f, _ConsoleNoiseFilter) for f in console[0].filters)

    logging.getLogger("optodo.tasks").debug("into the file only")
    file_handlers[0].flush()
    assert "into the file only" in log_file.read_text(encoding="utf-8")


def test_setup_twice_does_not_duplicate_handlers(restore_root_logging, tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)
    assert len(restore_root_logging.handlers) == 2


def test_console_filter_keeps_own_logs_and_drops_library_chatter() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("optodo", logging.DEBUG)) is True
    assert f.filter(_record("optodo.tasks", logging.INFO)) is True
    assert f.filter(_record("httpx", logging.INFO)) is False
    assert f.filter(_record("asyncio", logging.WARNING)) is False
    assert f.filter(_record("py.warnings", logging.WARNING)) is False
    assert f.filter(_record("httpx", logging.ERROR)) is True
    assert f.filter(_record("optodox", logging.INFO)) is False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("info", logging.INFO),
        ("DEBUG", logging.DEBUG),
        (" warning ", logging.WARNING),
        ("15", 15),
        ("", logging.ERROR),
        (None, logging.ERROR),
        ("bogus", logging.ERROR),
    ],
)
def test_level_from_name(raw, expected) -> None:
    assert level_from_name(raw, default=logging.ERROR) == expected
