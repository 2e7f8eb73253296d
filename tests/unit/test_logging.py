"""Tests for the fluent_dialogs.logging module."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import structlog

from fluent_dialogs.logging import (
    bind_context,
    clear_context,
    configure_logging,
    dialog_context,
    get_logger,
)


class TestConfigureLogging:
    def test_configure_logging_default(self) -> None:
        configure_logging()

        assert structlog.get_logger() is not None

    def test_configure_logging_json_via_env(self) -> None:
        with patch.dict(os.environ, {"FLUENT_DIALOGS_LOG_FORMAT": "json"}):
            configure_logging()

            assert structlog.get_logger() is not None

    def test_configure_logging_custom_level(self) -> None:
        configure_logging(level=logging.DEBUG)

        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_level_from_env(self) -> None:
        with patch.dict(os.environ, {"FLUENT_DIALOGS_LOG_LEVEL": "ERROR"}):
            configure_logging()

            assert logging.getLogger().level == logging.ERROR

    def test_invalid_env_level_falls_back_to_warning(self) -> None:
        with patch.dict(os.environ, {"FLUENT_DIALOGS_LOG_LEVEL": "LOUD"}):
            configure_logging()

            assert logging.getLogger().level == logging.WARNING

    def test_single_handler_after_reconfigure(self) -> None:
        configure_logging()
        configure_logging(force_json=True)

        assert len(logging.getLogger().handlers) == 1


class TestContext:
    def test_bind_and_clear_context(self) -> None:
        bind_context(dialog_style="alert")
        assert structlog.contextvars.get_contextvars() == {"dialog_style": "alert"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_get_logger_binds(self) -> None:
        log = get_logger("fluent_dialogs.test").bind(dialog_title="T")

        assert log is not None

    def test_dialog_context_restores_outer_values(self) -> None:
        bind_context(dialog_title="outer")

        with dialog_context(dialog_style="alert", dialog_title="inner"):
            assert structlog.contextvars.get_contextvars() == {
                "dialog_style": "alert",
                "dialog_title": "inner",
            }

        assert structlog.contextvars.get_contextvars() == {"dialog_title": "outer"}
        clear_context()
