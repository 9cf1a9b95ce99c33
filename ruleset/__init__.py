"""
Rule-execution engine package.

Applies an ordered sequence of preconditions and rules to a shared,
mutable environment, threading a freshly created result object through
every step and stopping early when a precondition fails or a rule aborts.

Modules of interest:
- models: Step types (Precondition, Rule), outcomes and authoring helpers.
- engine: BaseRuleSet and RuleSet with the short-circuiting traversal.

The engine holds no mutable state beyond its immutable step sequence, so
one rule set may be reused for any number of non-overlapping executions.
"""

from .engine import BaseRuleSet, DiagnosticSink, RuleSet
from .models import (
    NoResult, Outcome, Precondition, Rule, Step, StepKind,
    always, precondition, rule
)

__all__ = [
    "BaseRuleSet", "DiagnosticSink", "RuleSet",
    "NoResult", "Outcome", "Precondition", "Rule", "Step", "StepKind",
    "always", "precondition", "rule",
]
