"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- processor chain selection
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    _build_processors,
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """pytest is running these tests, so it is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestBuildProcessors:
    """Test suite for the processor chain."""

    def test_production_renders_json(self):
        processors = _build_processors(prod_mode=True)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        processors = _build_processors(prod_mode=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_context_is_merged_first(self):
        processors = _build_processors(prod_mode=False)
        assert processors[0] is structlog.contextvars.merge_contextvars

    def test_extra_processors_before_renderer(self):
        def add_app(logger, method_name, event_dict):
            event_dict["app"] = "translator"
            return event_dict

        processors = _build_processors(prod_mode=True, extra_processors=[add_app])

        assert processors[-2] is add_app
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self):
        result = configure_logging()

        assert hasattr(result, "info")
        assert hasattr(result, "exception")
        assert hasattr(result, "bind")

    @pytest.mark.parametrize("log_level", ["DEBUG", "INFO", "WARNING"])
    def test_configure_logging_accepts_overrides(self, log_level):
        """In test environment output is suppressed but overrides are accepted."""
        assert configure_logging(log_level=log_level, is_production=True) is not None

    def test_configure_logging_suppresses_in_test_env(self):
        configure_logging()
        assert logging.getLogger().level > logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_calling_module(self):
        logger = get_module_logger()

        context = structlog.get_context(logger)
        assert context["component"] in (__name__.split(".")[-1], "unknown")

    def test_logger_is_usable(self):
        logger = get_module_logger()
        logger.info("translations_loaded", key_count=2)
