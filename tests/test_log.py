import pytest

from emberframe import log
from emberframe.log import LogLevel


def test_info_goes_to_stdout_with_prefix(capsys):
    result = log.info("hello %s\n", "world")
    captured = capsys.readouterr()
    assert result == "[INFO] hello world\n"
    assert captured.out == result
    assert captured.err == ""


def test_debug_goes_to_stdout(capsys):
    result = log.debug("value")
    captured = capsys.readouterr()
    assert result.startswith("[DEBUG] ")
    assert captured.out == result


@pytest.mark.parametrize(
    "func, prefix",
    [
        (log.warning, "[WARNING] "),
        (log.error, "[ERROR] "),
    ],
)
def test_warning_and_error_go_to_stderr(capsys, func, prefix):
    result = func("problem %d", 3)
    captured = capsys.readouterr()
    assert result == prefix + "problem 3"
    assert captured.err == result
    assert captured.out == ""


def test_fatal_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        log.fatal("boom\n")
    assert excinfo.value.code == 1
    assert capsys.readouterr().err == "[FATAL] boom\n"


def test_unknown_level_writes_nothing(capsys):
    assert log.log_output(99, "ignored") is None
    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""


def test_percent_without_args_is_literal(capsys):
    result = log.log_output(LogLevel.INFO, "100%")
    assert result.endswith("100%")
    capsys.readouterr()


def test_long_message_is_truncated(capsys):
    result = log.info("x" * 10000)
    capsys.readouterr()
    assert len(result) == log.MAX_MESSAGE_LENGTH
    assert result.startswith("[INFO] x")