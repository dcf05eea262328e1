from __future__ import annotations

import json

from reform import logger as package_logger
from reform import logging as reform_logging
from reform.exceptions import SettingsError
from reform.logging import configure_logging, get_logger
from reform.settings import Settings


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(log_json=False, log_level="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()


def test_json_logs_flatten_extra(capsys) -> None:
    configure_logging(settings=Settings(log_json=True, log_level="INFO"), force=True)
    get_logger("tests").info("Form rendered", extra={"form_type": "Contact"})

    line = capsys.readouterr().err.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["message"] == "Form rendered"
    assert payload["form_type"] == "Contact"
    assert payload["level"] == "info"


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))


def test_get_logger_survives_invalid_settings(monkeypatch) -> None:
    def _raise_settings_error() -> Settings:
        raise SettingsError(exc=ValueError("bad DEFAULT_RENDERER"))

    monkeypatch.setattr("reform.logging._LOGGING_CONFIGURED", False)
    monkeypatch.setattr("reform.logging.get_settings", _raise_settings_error)

    logger = get_logger("tests")

    assert callable(getattr(logger, "info", None))
    assert reform_logging._LOGGING_CONFIGURED is True
