"""
Unit tests for structured logging helpers.
"""

import json
import logging

import pytest
import structlog

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from shared import logging as shared_logging
from shared.config import RulesetConfig
from shared.logging import (
    add_correlation_context, add_service_context, configure_from_config,
    configure_logging, execution_context, execution_id_var, get_logger
)


@pytest.fixture(autouse=True)
def reset_structlog(monkeypatch):
    """Restore structlog, root level and service name after each test."""
    monkeypatch.setattr(shared_logging, "_service_name", None)
    root_level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(root_level)
    structlog.reset_defaults()


class TestCorrelationContext:
    """Test cases for execution correlation."""

    def test_execution_context_sets_and_resets(self):
        """Test that the execution ID is only bound inside the context."""
        with execution_context("RoundRuleSet", execution_id="exec-1") as execution_id:
            assert execution_id == "exec-1"
            event = add_correlation_context(None, "info", {"event": "x"})
            assert event["execution_id"] == "exec-1"
            assert event["ruleset"] == "RoundRuleSet"

        assert execution_id_var.get() is None
        assert add_correlation_context(None, "info", {"event": "x"}) == {"event": "x"}

    def test_execution_context_generates_id(self):
        """Test that an execution ID is generated when none is given."""
        with execution_context("RuleSet") as execution_id:
            assert execution_id
            assert execution_id_var.get() == execution_id

    def test_context_reset_on_error(self):
        """Test that the context is cleared when a step raises."""
        with pytest.raises(ValueError):
            with execution_context("RuleSet"):
                raise ValueError("step failed")

        assert execution_id_var.get() is None


class TestServiceContext:
    """Test cases for service context."""

    def test_service_from_logger_name(self):
        """Test fallback to the logger name prefix."""
        event = add_service_context(None, "info", {"logger": "ruleset.engine"})

        assert event["service"] == "ruleset"

    def test_service_from_configuration(self):
        """Test the configured service name wins."""
        configure_logging("scoring", log_level="warning")

        event = add_service_context(None, "info", {"logger": "ruleset.engine"})

        assert event["service"] == "scoring"


class TestConfigureLogging:
    """Test cases for logging configuration."""

    def test_json_output(self, caplog):
        """Test that configured loggers emit JSON messages."""
        configure_logging("ruleset", log_level="info")
        logger = get_logger("ruleset.engine")

        logger.info("Executing step", step="Determine winner")

        record = [r for r in caplog.records if r.name == "ruleset.engine"][-1]
        payload = json.loads(record.getMessage())
        assert payload["event"] == "Executing step"
        assert payload["step"] == "Determine winner"
        assert payload["service"] == "ruleset"
        assert payload["level"] == "info"

    def test_configure_from_config(self):
        """Test applying the configured log level."""
        configure_from_config(RulesetConfig(_env_file=None, log_level="error"))

        assert logging.getLogger().level == logging.ERROR
