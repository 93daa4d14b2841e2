import io
import logging
import sys

import pytest

from verse_phonetics.core import DictionaryUnavailableError, build_engine
from verse_phonetics.utils import logging_config
from verse_phonetics.utils.observability import create_counter, get_logger


def test_structured_logger_renders_bound_and_call_context(caplog):
    caplog.set_level(logging.INFO, logger="verse_phonetics.tests")
    logger = get_logger("verse_phonetics.tests").bind(component="loader")

    logger.info("Index ready", context={"keys": 3})

    messages = [record.getMessage() for record in caplog.records]
    assert 'Index ready | {"component": "loader", "keys": 3}' in messages


def test_engine_build_logs_summary(caplog, sample_text):
    caplog.set_level(logging.INFO, logger="verse_phonetics")

    build_engine(text=sample_text)

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Built rhyme index") for message in messages)
    assert any(message.startswith("Phonetic engine ready") for message in messages)


def test_failed_build_logs_error(caplog, tmp_path):
    caplog.set_level(logging.ERROR, logger="verse_phonetics")

    with pytest.raises(DictionaryUnavailableError):
        build_engine(tmp_path / "absent.dict")

    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].getMessage().startswith("Pronouncing dictionary unavailable")


def test_empty_dictionary_logs_one_error(caplog, tmp_path):
    caplog.set_level(logging.ERROR, logger="verse_phonetics")
    dict_path = tmp_path / "empty.dict"
    dict_path.write_text(";;; nothing\n", encoding="utf-8")

    with pytest.raises(DictionaryUnavailableError):
        build_engine(dict_path)
    with pytest.raises(DictionaryUnavailableError):
        build_engine(text=";;; nothing\n")

    errors = [record.getMessage() for record in caplog.records if record.levelno == logging.ERROR]
    assert len(errors) == 2
    assert errors[0].startswith("Pronouncing dictionary is empty")
    assert errors[1].startswith("Dictionary text contains no entries")


def test_create_counter_reuses_registered_metric():
    first = create_counter("verse_phonetics_test_events_total", "Test events.")
    second = create_counter("verse_phonetics_test_events_total", "Test events.")

    first.inc()
    second.inc(2)

    assert first._impl is second._impl


def test_configure_logging_reads_environment(monkeypatch):
    monkeypatch.setenv(logging_config.LOG_LEVEL_ENV, "debug")
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)

    logging_config.configure_logging()

    assert logging.getLogger("verse_phonetics").level == logging.DEBUG
    logging.getLogger("verse_phonetics").setLevel(logging.NOTSET)


def test_resolve_level_accepts_names_numbers_and_garbage():
    assert logging_config._resolve_level("warning") == logging.WARNING
    assert logging_config._resolve_level("10") == logging.DEBUG
    assert logging_config._resolve_level("nonsense") == logging.INFO
    assert logging_config._resolve_level(None) == logging.INFO


def test_configure_logging_picks_format_and_stream(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setenv(logging_config.LOG_FORMAT_ENV, "Brief")
    monkeypatch.delenv(logging_config.LOG_LEVEL_ENV, raising=False)
    stream = io.StringIO()

    level = logging_config.configure_logging("warning", stream=stream)

    assert level == logging.WARNING
    assert captured["format"] == logging_config.LOG_FORMATS["brief"]
    assert captured["stream"] is stream
    # A second call keeps the first configuration.
    assert logging_config.configure_logging("debug") == logging.WARNING
    logging.getLogger("verse_phonetics").setLevel(logging.NOTSET)


def test_unknown_log_format_uses_default(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)

    logging_config.configure_logging("info", log_format="fancy")

    assert captured["format"] == logging_config.LOG_FORMATS[logging_config.DEFAULT_LOG_FORMAT]
    assert captured["stream"] is sys.stderr
    logging.getLogger("verse_phonetics").setLevel(logging.NOTSET)
