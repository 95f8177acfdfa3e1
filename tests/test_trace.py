import logging

from pnutil.trace import Tracer, format_value


def test_format_value():
    assert format_value(None) == "<null>"
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value("0123456789abcdefXYZ") == "0123456789abcdef"
    assert format_value(0.5) == "0.5"
    assert format_value(-7) == "-7"
    assert format_value(b"x") == "b'x'"


def test_exit_returns_value(caplog):
    caplog.set_level(logging.DEBUG, logger="test.trace")
    tracer = Tracer(logging.getLogger("test.trace"))
    rc = object()
    assert tracer.exit("f", rc) is rc
    tracer.exit("g")
    messages = [r.getMessage() for r in caplog.records]
    assert messages[-1] == "<- g "


def test_disabled_tracer_logs_nothing(caplog):
    logger = logging.getLogger("test.trace.quiet")
    caplog.set_level(logging.INFO, logger="test.trace.quiet")
    tracer = Tracer(logger)
    assert not tracer.enabled()
    tracer.entry("f")
    tracer.data("x", 1)
    assert tracer.exit("f", 2) == 2
    assert [r for r in caplog.records if r.name == "test.trace.quiet"] == []


def test_custom_level(caplog):
    caplog.set_level(logging.INFO, logger="test.trace.info")
    tracer = Tracer(logging.getLogger("test.trace.info"), level=logging.INFO)
    tracer.entry("f")
    assert caplog.records[-1].levelno == logging.INFO
    assert caplog.records[-1].getMessage() == "-> f"


def test_from_env():
    assert Tracer.from_env(environ={}) is None
    assert Tracer.from_env(environ={"PN_TRACE_UTIL": "no"}) is None
    tracer = Tracer.from_env(environ={"PN_TRACE_UTIL": "On"})
    assert isinstance(tracer, Tracer)
    assert tracer.logger.name == "pnutil.trace"


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("PN_TRACE_UTIL", "yes")
    assert Tracer.from_env() is not None
    monkeypatch.delenv("PN_TRACE_UTIL")
    assert Tracer.from_env() is None
