"""Tests for environment-driven configuration."""

import pytest

from alumni_search_api.app.core.config import DEFAULT_PORT, _int_env


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, DEFAULT_PORT),
        ("", DEFAULT_PORT),
        ("8080", 8080),
        (" 9000 ", 9000),
        ("eighty", DEFAULT_PORT),
    ],
)
def test_port_parsing(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv("PORT", raising=False)
    else:
        monkeypatch.setenv("PORT", value)
    assert _int_env("PORT", DEFAULT_PORT) == expected


def test_setup_logging_attaches_handlers_once(tmp_path, monkeypatch):
    import logging

    from alumni_search_api.app.core.logging_config import setup_logging

    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "logs" / "alumni.log"

    setup_logging("debug", str(logfile))
    setup_logging("warning", str(logfile))

    assert len(root.handlers) == 2
    assert root.level == logging.WARNING
    logging.getLogger("alumni.test").warning("stored")
    for handler in root.handlers:
        handler.flush()
    assert "[WARNING] alumni.test: stored" in logfile.read_text(encoding="utf-8")
    for handler in root.handlers:
        handler.close()
