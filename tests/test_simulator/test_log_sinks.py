"""
Log levels, sink filtering and the sink factory
"""

import logging

import pytest

from config.simulation import LoggingConfig
from simulator.implementations import ConsoleLogSink, FileLogSink, LogSinkFactory, StdLoggingSink
from simulator.interfaces.log_sink import LogLevel
from tests.conftest import RecordingLogSink


class TestLogLevel:
    def test_ordering(self):
        assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR

    @pytest.mark.parametrize("name,expected", [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARN),
        (LogLevel.ERROR, LogLevel.ERROR),
    ])
    def test_parse(self, name, expected):
        assert LogLevel.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            LogLevel.parse("TRACE")


def test_messages_below_min_level_are_dropped():
    sink = RecordingLogSink(min_level=LogLevel.WARN)
    sink.debug("d")
    sink.info("i")
    sink.warn("w")
    sink.error("e")
    assert sink.records == [(LogLevel.WARN, "w"), (LogLevel.ERROR, "e")]


def test_console_sink_format(capsys):
    sink = ConsoleLogSink(min_level=LogLevel.INFO, show_timestamp=False)
    sink.debug("hidden")
    sink.warn("door stuck")
    assert capsys.readouterr().out == "[WARN] door stuck\n"


def test_file_sink_appends_lines(tmp_path):
    path = tmp_path / "logs" / "run.log"
    sink = FileLogSink(path, min_level=LogLevel.INFO)
    sink.info("first")
    sink.debug("skipped")
    sink.error("second")
    sink.close()
    sink.info("after close")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("[INFO] first")
    assert lines[1].endswith("[ERROR] second")


def test_stdlib_sink_maps_levels(caplog):
    sink = StdLoggingSink(logger_name="elevator.test")
    with caplog.at_level(logging.DEBUG, logger="elevator.test"):
        sink.warn("careful")
        sink.debug("detail")
    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert (logging.WARNING, "careful") in levels
    assert (logging.DEBUG, "detail") in levels


class TestLogSinkFactory:
    def test_console(self):
        sink = LogSinkFactory.create("console", level="WARN")
        assert isinstance(sink, ConsoleLogSink)
        assert sink.min_level is LogLevel.WARN

    def test_file_requires_path(self):
        with pytest.raises(ValueError):
            LogSinkFactory.create("file")

    def test_unknown_sink(self):
        with pytest.raises(ValueError):
            LogSinkFactory.create("syslog")

    def test_from_config(self, tmp_path):
        config = LoggingConfig(sink="file", level="debug", file_path=str(tmp_path / "x.log"))
        sink = LogSinkFactory.from_config(config)
        try:
            assert isinstance(sink, FileLogSink)
            assert sink.min_level is LogLevel.DEBUG
        finally:
            sink.close()

    def test_stdlib_from_config(self):
        config = LoggingConfig(sink="stdlib", level="ERROR", logger_name="elevator.cfg")
        sink = LogSinkFactory.from_config(config)
        assert isinstance(sink, StdLoggingSink)
        assert sink.logger.name == "elevator.cfg"
