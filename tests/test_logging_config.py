import logging

from tscat.core.logging_config import ColoredFormatter


def _record(level):
    return logging.LogRecord("tscat.test", level, __file__, 1, "hello", None, None)


def test_level_name_coloured_and_restored():
    fmt = ColoredFormatter("%(levelname)s %(message)s")
    record = _record(logging.WARNING)
    out = fmt.format(record)
    assert out == "\033[33mWARNING\033[0m hello"
    assert record.levelname == "WARNING"


def test_custom_level_left_plain():
    fmt = ColoredFormatter("%(levelname)s %(message)s")
    assert fmt.format(_record(25)) == "Level 25 hello"
