"""
Shared utilities for the rule-execution engine.

This package aggregates the ambient building blocks used by the engine
and its consumers:

- config: Engine configuration via pydantic-settings
- logging: Structured logging with execution correlation
- errors: Canonical error types and responses

Do not import from ruleset or consumer packages into shared/.
"""
