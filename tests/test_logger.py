# tests/test_logger.py
"""Tests for the package logger."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyboxscene.logger import LogLevel, SceneLogger, get_logger, level_from_name, set_logger


def test_file_logger_respects_level(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "scene.log"
    logger = SceneLogger(mode="file", log_file=str(log_file), file_level=LogLevel.INFO)

    logger.debug("hidden")
    logger.info("box placed")
    logger("as warning", "warning")

    lines = log_file.read_text().splitlines()
    assert len(lines) == 2
    assert "[INFO]" in lines[0] and "box placed" in lines[0]
    assert "[WARNING]" in lines[1]


def test_console_logger_routes_by_level(capsys) -> None:
    logger = SceneLogger(include_timestamp=False, name="scene")

    logger.info("hello")
    logger.error("broken")

    out, err = capsys.readouterr()
    assert out.strip() == "[INFO] [scene] hello"
    assert "broken" in err


def test_set_level_by_name() -> None:
    logger = SceneLogger()

    logger.set_level("error")

    assert not logger.isEnabledFor(LogLevel.WARNING)
    assert logger.isEnabledFor(LogLevel.CRITICAL)


def test_level_from_name_falls_back() -> None:
    assert level_from_name("debug") is LogLevel.DEBUG
    assert level_from_name("nonsense") is LogLevel.INFO
    assert level_from_name(LogLevel.ERROR) is LogLevel.ERROR


def test_invalid_configuration_raises() -> None:
    with pytest.raises(ValueError):
        SceneLogger(mode="syslog")
    with pytest.raises(ValueError):
        SceneLogger(mode="file")


def test_set_logger_swaps_default() -> None:
    custom = SceneLogger(name="custom")

    set_logger(custom)
    assert get_logger() is custom

    with pytest.raises(ValueError):
        set_logger(object())

    set_logger(None)
    assert get_logger() is not custom
