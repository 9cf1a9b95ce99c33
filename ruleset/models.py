"""
Step data models for the rule-execution engine.

A rule set is an ordered sequence of steps. Each step is either a
precondition (a read-only gate) or a rule (an optionally applicable unit
of logic that may mutate the environment and the result).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar, Union


TEnv = TypeVar("TEnv")
TResult = TypeVar("TResult")


class StepKind(str, Enum):
    """Step kinds."""
    PRECONDITION = "precondition"
    RULE = "rule"


class Outcome(str, Enum):
    """Rule apply outcomes."""
    CONTINUE = "continue"
    ABORT = "abort"


def always(env: Any) -> bool:
    """Applicability predicate for rules that always apply."""
    return True


@dataclass(frozen=True)
class Precondition(Generic[TEnv, TResult]):
    """Gate that decides whether the remaining steps run.

    ``test`` must not mutate the environment or the result, except to
    record its own failure in the result before returning False. The
    engine does not enforce this.
    """
    display_name: str
    test: Callable[[TEnv, TResult], bool]
    kind: StepKind = field(default=StepKind.PRECONDITION, init=False)


@dataclass(frozen=True)
class Rule(Generic[TEnv, TResult]):
    """Conditionally applicable unit of domain logic.

    ``apply`` returns ``Outcome.ABORT`` or ``False`` to stop the rule set.
    Any other value, including ``None``, continues with the next step.
    """
    display_name: str
    apply: Callable[[TEnv, TResult], Optional[Outcome]]
    does_apply: Callable[[TEnv], bool] = always
    kind: StepKind = field(default=StepKind.RULE, init=False)


Step = Union[Precondition, Rule]


@dataclass(frozen=True)
class NoResult:
    """Result type for rule sets that only work on their environment."""


def precondition(display_name: str) -> Callable[[Callable[[Any, Any], bool]], Precondition]:
    """Decorator turning a test function into a Precondition."""

    def decorator(func: Callable[[Any, Any], bool]) -> Precondition:
        return Precondition(display_name=display_name, test=func)

    return decorator


def rule(display_name: str,
         when: Optional[Callable[[Any], bool]] = None) -> Callable[[Callable[[Any, Any], Optional[Outcome]]], Rule]:
    """Decorator turning an apply function into a Rule.

    ``when`` becomes the rule's applicability predicate.
    """

    def decorator(func: Callable[[Any, Any], Optional[Outcome]]) -> Rule:
        return Rule(display_name=display_name, apply=func, does_apply=when or always)

    return decorator
