"""
Shared error handling for the rule-execution engine.

Only rule set construction and the result factory contract are checked
here. Faults raised by a step implementation are never wrapped.
"""

from typing import Dict, Any, Optional


class RulesetException(Exception):
    """Base exception for the rule-execution engine."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidStepError(RulesetException):
    """A rule set contains something that is not a precondition or rule."""

    def __init__(self, message: str = "Invalid step", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_STEP", message, details)


class ResultFactoryError(RulesetException):
    """The result factory did not produce a usable result."""

    def __init__(self, message: str = "Result factory returned no result", details: Optional[Dict[str, Any]] = None):
        super().__init__("RESULT_FACTORY_ERROR", message, details)


class ValidationError(RulesetException):
    """Validation-related errors."""

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)
