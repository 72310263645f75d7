import importlib
import logging

import pytest

import attempt_log as attempt_log_module


def _drop_handlers():
    logger = logging.getLogger(attempt_log_module.LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture
def enabled_log(tmp_path, monkeypatch):
    log_path = tmp_path / "logs" / "attempts.log"
    monkeypatch.setenv("PCP_ATTEMPT_LOG", str(log_path))
    _drop_handlers()
    module = importlib.reload(attempt_log_module)
    yield module, log_path
    _drop_handlers()
    monkeypatch.delenv("PCP_ATTEMPT_LOG", raising=False)
    importlib.reload(attempt_log_module)


def _flush(module):
    for handler in module.ATTEMPT_LOGGER.handlers:
        handler.flush()


def test_disabled_without_path(monkeypatch):
    monkeypatch.delenv("PCP_ATTEMPT_LOG", raising=False)
    _drop_handlers()
    module = importlib.reload(attempt_log_module)
    assert module.ATTEMPT_LOGGER.handlers == []
    # no handler: must be a silent no-op
    module.log_attempt_detail("Nothing", seed="x")


def test_writes_event_with_fields(enabled_log):
    module, log_path = enabled_log
    module.log_attempt_detail("Generation started", seed="abc", empty="", missing=None, tiles=3)
    _flush(module)
    text = log_path.read_text(encoding="utf-8")
    assert "[INFO] Generation started | seed=abc tiles=3" in text
    assert "empty=" not in text
    assert "missing=" not in text


def test_generation_events_reach_log(enabled_log):
    module, log_path = enabled_log
    from generator.orchestrator import generate_puzzle

    generate_puzzle("easy", "logged")
    _flush(module)
    text = log_path.read_text(encoding="utf-8")
    assert "Generation started | seed=logged preset=easy" in text
    assert "Generation finished | seed=logged solvable=1" in text


def test_fmt_seconds():
    assert attempt_log_module.fmt_seconds(None) is None
    assert attempt_log_module.fmt_seconds(1.23456) == "1.235s"
    assert attempt_log_module.fmt_seconds("nope") is None
