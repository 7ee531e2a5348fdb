import io
import re

from smart_chessboard.logger import Logger

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text):
    return _ANSI.sub("", text)


def test_info_format_to_stream():
    buf = io.StringIO()
    Logger(buf).info("hello")
    assert _plain(buf.getvalue()) == "[INFO] -> hello\n"


def test_error_format_to_stream():
    buf = io.StringIO()
    Logger(buf).error("broken")
    assert _plain(buf.getvalue()) == "[ERROR] -> broken\n"


def test_info_is_blue_and_error_is_red():
    info_buf = io.StringIO()
    err_buf = io.StringIO()
    Logger(info_buf).info("a")
    Logger(err_buf).error("a")
    assert info_buf.getvalue().startswith("\x1b[34m")
    assert err_buf.getvalue().startswith("\x1b[31m")
    assert info_buf.getvalue() != err_buf.getvalue()


def test_default_stream_is_stdout(capsys):
    Logger().info("to stdout")
    captured = capsys.readouterr()
    assert _plain(captured.out) == "[INFO] -> to stdout\n"
    assert captured.err == ""


def test_each_call_writes_one_line():
    buf = io.StringIO()
    log = Logger(buf)
    log.info("one")
    log.error("two")
    lines = _plain(buf.getvalue()).splitlines()
    assert lines == ["[INFO] -> one", "[ERROR] -> two"]