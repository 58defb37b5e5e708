import io
import re

import pytest

from livingocean import logger
from livingocean.logger import Logger, LogLevel, level_label

STAMP = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"
STAMP_WIDTH = len("0000-00-00 00:00:00")


@pytest.mark.parametrize(
    "level, label",
    [
        (LogLevel.DEBUG, "[DEBUG]"),
        (LogLevel.INFO, "[INFO] "),
        (LogLevel.WARNING, "[WARN] "),
        (LogLevel.ERROR, "[ERROR]"),
    ],
)
def test_level_label(level, label):
    assert level_label(level) == label


def test_level_label_unknown():
    assert level_label(99) == "[UNKNW]"


def test_levels_are_ordered():
    labels = [level_label(level) for level in sorted(LogLevel)]
    assert labels == ["[DEBUG]", "[INFO] ", "[WARN] ", "[ERROR]"]


def test_console_threshold_filters_low_levels():
    out = io.StringIO()
    log = Logger(console=out)
    log.debug("quiet debug")
    log.info("quiet info")
    log.warn("loud warn")
    log.error("loud error")
    text = out.getvalue()
    assert "quiet" not in text
    assert "loud warn" in text
    assert "loud error" in text


def test_console_line_format():
    out = io.StringIO()
    Logger(console=out).log(LogLevel.WARNING, "a", 1, "b")
    line = out.getvalue().rstrip("\n")
    assert line[STAMP_WIDTH:] == " [WARN]  a1b"
    assert re.fullmatch(STAMP, line[:STAMP_WIDTH]) is not None


def test_default_console_is_stdout(capsys):
    Logger().error("to stdout")
    assert "[ERROR] to stdout" in capsys.readouterr().out


def test_file_receives_info_but_not_debug(tmp_path):
    path = tmp_path / "run.log"
    with Logger(console=io.StringIO()) as log:
        log.open(path)
        assert log.is_open
        log.info("info line")
        log.debug("debug line")
    assert not log.is_open
    text = path.read_text(encoding="utf-8")
    assert "info line" in text
    assert "debug line" not in text
    assert f"Logger initialized. Logging to file: {path}" in text
    assert text.rstrip("\n").endswith("Logger shutting down.")


def test_file_is_appended(tmp_path):
    path = tmp_path / "run.log"
    for word in ("first", "second"):
        log = Logger(console=io.StringIO())
        log.open(path)
        log.info(word)
        log.close()
    text = path.read_text(encoding="utf-8")
    assert text.index("first") < text.index("second")


def test_open_failure_reported_on_stderr(tmp_path, capsys):
    log = Logger(console=io.StringIO())
    log.open(tmp_path)
    assert not log.is_open
    assert f"Failed to open log file: {tmp_path}" in capsys.readouterr().err


def test_close_without_file_is_harmless():
    out = io.StringIO()
    log = Logger(console=out, console_level=LogLevel.DEBUG)
    log.close()
    assert out.getvalue() == ""


def test_module_functions_use_shared_logger(tmp_path):
    path = tmp_path / "shared.log"
    logger.init(path)
    logger.info("shared info")
    logger.debug("shared debug")
    logger.shutdown()
    text = path.read_text(encoding="utf-8")
    assert "shared info" in text
    assert "shared debug" not in text
    assert "Logger initialized for console output." in text


def test_module_warn_goes_to_console(capsys):
    logger.warn("careful ", 3)
    assert "[WARN]  careful 3" in capsys.readouterr().out