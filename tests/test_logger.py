"""Tests for logger setup."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from typed_template import Settings, Template, setup_logger, str_


def test_setup_logger_writes_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "typed_template.log"
    settings = Settings(_env_file=None, log_level="DEBUG", log_file=log_file)

    setup_logger(settings)
    logger.debug("hello from test")
    logger.remove()

    assert log_file.exists()
    assert "hello from test" in log_file.read_text(encoding="utf-8")


def test_library_records_need_setup_logger(tmp_path: Path) -> None:
    messages: list[str] = []
    logger.disable("typed_template")
    sink_id = logger.add(messages.append, level="DEBUG")
    Template.new("Hello ", str_())
    logger.remove(sink_id)

    assert messages == []

    log_file = tmp_path / "typed_template.log"
    setup_logger(Settings(_env_file=None, log_level="DEBUG", log_file=log_file))
    Template.new("Hello ", str_())
    logger.remove()

    assert "Built template with 1 placeholders" in log_file.read_text(encoding="utf-8")
