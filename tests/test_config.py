"""Tests for page_elements.config.SessionParameters."""

from __future__ import annotations

import logging

import pytest

from conftest import FakeDriver
from page_elements import Page, SessionParameters


ENV_VARS = (
    "PAGE_ELEMENTS_DEFAULT_WAIT",
    "PAGE_ELEMENTS_POLL_INTERVAL",
    "PAGE_ELEMENTS_LINK_SETTLE",
    "PAGE_ELEMENTS_DEBUG",
)


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSessionParameters:

    def test_defaults(self) -> None:
        parameters = SessionParameters()

        assert parameters.default_wait_seconds == 0
        assert parameters.poll_interval_seconds == 0.5
        assert parameters.link_settle_seconds == 2.0
        assert parameters.wait_delegate is None
        assert parameters.debug is False

    @pytest.mark.parametrize("kwargs", [
        {"default_wait_seconds": -1},
        {"poll_interval_seconds": 0},
        {"link_settle_seconds": -0.5},
    ])
    def test_validation(self, kwargs) -> None:
        with pytest.raises(ValueError):
            SessionParameters(**kwargs)


class TestFromEnv:

    def test_defaults_without_env(self, clean_env) -> None:
        assert SessionParameters.from_env() == SessionParameters()

    def test_reads_env(self, clean_env) -> None:
        clean_env.setenv("PAGE_ELEMENTS_DEFAULT_WAIT", "10")
        clean_env.setenv("PAGE_ELEMENTS_POLL_INTERVAL", "0.25")
        clean_env.setenv("PAGE_ELEMENTS_LINK_SETTLE", "0")
        clean_env.setenv("PAGE_ELEMENTS_DEBUG", "true")

        parameters = SessionParameters.from_env()

        assert parameters.default_wait_seconds == 10
        assert parameters.poll_interval_seconds == 0.25
        assert parameters.link_settle_seconds == 0
        assert parameters.debug is True

    def test_blank_values_use_defaults(self, clean_env) -> None:
        clean_env.setenv("PAGE_ELEMENTS_DEFAULT_WAIT", "  ")
        assert SessionParameters.from_env().default_wait_seconds == 0

    def test_invalid_number(self, clean_env) -> None:
        clean_env.setenv("PAGE_ELEMENTS_POLL_INTERVAL", "fast")
        with pytest.raises(ValueError, match="PAGE_ELEMENTS_POLL_INTERVAL"):
            SessionParameters.from_env()

    def test_wait_delegate_is_passed_through(self, clean_env) -> None:
        def delegate():
            return None

        assert SessionParameters.from_env(delegate).wait_delegate is delegate


class TestConfigureLogging:

    @pytest.fixture()
    def package_logger(self):
        logger = logging.getLogger("page_elements")
        handlers, level = list(logger.handlers), logger.level
        yield logger
        logger.handlers = handlers
        logger.setLevel(level)

    def test_debug_adds_handler(self, package_logger) -> None:
        package_logger.handlers = []

        SessionParameters(debug=True).configure_logging()
        SessionParameters(debug=True).configure_logging()

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_no_debug_leaves_logger_alone(self, package_logger) -> None:
        package_logger.handlers = []

        SessionParameters().configure_logging()

        assert package_logger.handlers == []

    def test_debug_page_configures_logging(self, package_logger) -> None:
        package_logger.handlers = []

        Page(FakeDriver(), "Debug Page", SessionParameters(debug=True))

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_quiet_page_leaves_logger_alone(self, package_logger) -> None:
        package_logger.handlers = []

        Page(FakeDriver(), "Quiet Page")

        assert package_logger.handlers == []
