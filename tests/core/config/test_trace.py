# tests/core/config/test_trace.py
"""
Testes do log estruturado de resolução (ResolutionLog).

Os testes asseguram que:
- eventos são estruturados e preservam campos extras
- eventos abaixo do nível mínimo são descartados
- o nível mínimo pode vir de LOG_LEVEL
- `get_events` retorna cópias e `clear` esvazia o buffer
"""

import pytest

from atlas_config.core.config.trace import ResolutionLog


def test_structured_log_event():
    log = ResolutionLog()
    log.info("layer.merged", "hello", layer="defaults", rank=0)

    assert len(log.events) == 1
    ev = log.events[-1]
    assert ev["level"] == "INFO"
    assert ev["event"] == "layer.merged"
    assert ev["message"] == "hello"
    assert ev["layer"] == "defaults"
    assert ev["rank"] == 0
    assert ev["timestamp"].endswith("+00:00")


def test_events_below_min_level_are_dropped():
    log = ResolutionLog(min_level="WARN")
    log.debug("a", "debug")
    log.info("b", "info")
    log.warn("c", "warn")
    log.error("d", "error")
    assert [e["level"] for e in log.events] == ["WARN", "ERROR"]


def test_min_level_from_environment():
    assert ResolutionLog.from_environ({"LOG_LEVEL": "debug"}).min_level == "DEBUG"
    assert ResolutionLog.from_environ({"LOG_LEVEL": "warning"}).min_level == "WARN"
    assert ResolutionLog.from_environ({}).min_level == "INFO"


def test_invalid_level_is_rejected():
    with pytest.raises(ValueError):
        ResolutionLog(min_level="LOUD")


def test_unknown_level_from_environment_falls_back_to_default():
    log = ResolutionLog.from_environ({"LOG_LEVEL": "verbose"})
    assert log.min_level == "INFO"
    log.info("x", "still logged")
    assert len(log.events) == 1


def test_get_events_returns_copy_and_filters():
    log = ResolutionLog(min_level="DEBUG")
    log.debug("layer.merged", "one")
    log.info("config.resolved", "two")

    events = log.get_events()
    events.clear()
    assert len(log.events) == 2
    assert [e["message"] for e in log.get_events("config.resolved")] == ["two"]


def test_clear_resets_buffer():
    log = ResolutionLog()
    log.info("x", "y")
    log.clear()
    assert log.get_events() == []
