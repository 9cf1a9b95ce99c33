"""
Shared logging configuration for the rule-execution engine.
"""

import sys
import structlog
import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional
from contextvars import ContextVar

# Context variables for correlation IDs
execution_id_var: ContextVar[Optional[str]] = ContextVar('execution_id', default=None)
ruleset_var: ContextVar[Optional[str]] = ContextVar('ruleset', default=None)

_service_name: Optional[str] = None


def configure_logging(service_name: str, log_level: str = "info", log_format: str = "json") -> None:
    """Configure structured logging for a service."""

    renderer = (
        structlog.dev.ConsoleRenderer()
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            add_service_context,
            add_correlation_context,
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )
    logging.getLogger().setLevel(getattr(logging, log_level.upper()))

    global _service_name
    _service_name = service_name


def configure_from_config(config) -> None:
    """Configure logging from a RulesetConfig."""
    configure_logging("ruleset", log_level=config.log_level, log_format=config.log_format)


def add_service_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add service context to log events."""
    if _service_name:
        event_dict["service"] = _service_name
        return event_dict

    # Fall back to the logger name prefix
    logger_name = event_dict.get("logger", "")
    if "." in logger_name:
        event_dict["service"] = logger_name.split(".")[0]

    return event_dict


def add_correlation_context(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Add correlation context to log events."""
    execution_id = execution_id_var.get()
    if execution_id:
        event_dict["execution_id"] = execution_id

    ruleset = ruleset_var.get()
    if ruleset:
        event_dict["ruleset"] = ruleset

    return event_dict


@contextmanager
def execution_context(ruleset: str, execution_id: Optional[str] = None) -> Iterator[str]:
    """Bind a correlation ID for the duration of one rule set execution."""
    if execution_id is None:
        execution_id = str(uuid.uuid4())
    execution_token = execution_id_var.set(execution_id)
    ruleset_token = ruleset_var.set(ruleset)
    try:
        yield execution_id
    finally:
        ruleset_var.reset(ruleset_token)
        execution_id_var.reset(execution_token)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
