"""
Rule execution engine.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterator, Optional, Sequence, Tuple

from shared.config import get_diagnostics_config
from shared.errors import InvalidStepError, ResultFactoryError
from shared.logging import execution_context, get_logger
from .models import NoResult, Outcome, Precondition, Rule, Step, StepKind, TEnv, TResult


DiagnosticSink = Callable[[str], None]


class BaseRuleSet(ABC, Generic[TEnv, TResult]):
    """Ordered collection of preconditions and rules.

    Subclasses supply the steps through ``get_rules`` and, when they
    produce a result, a fresh result through ``init_result``. The steps
    are fetched once and shared by every execution.
    """

    def __init__(self, debug: Optional[bool] = None, sink: Optional[DiagnosticSink] = None):
        self.logger = get_logger("ruleset.engine")
        self._debug = debug
        self.sink = sink
        self._steps: Optional[Tuple[Step, ...]] = None

    @abstractmethod
    def get_rules(self) -> Sequence[Step]:
        """Return the steps in execution order."""

    def init_result(self) -> TResult:
        """Create the result threaded through one execution."""
        return NoResult()

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def debug(self) -> bool:
        """Diagnostic mode, falling back to RULESET_DEBUG when not set."""
        if self._debug is None:
            return get_diagnostics_config().debug
        return self._debug

    @property
    def steps(self) -> Tuple[Step, ...]:
        """Validated, immutable step sequence."""
        if self._steps is None:
            self._steps = self._validate_steps(self.get_rules())
        return self._steps

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def exec(self, env: TEnv, debug: Optional[bool] = None) -> TResult:
        """Execute all steps in order against ``env``.

        Stops at the first failed precondition or aborting rule. Exceptions
        raised by a step propagate unchanged.
        """
        steps = self.steps
        result = self.init_result()
        if result is None:
            raise ResultFactoryError(details={"ruleset": self.name})

        if debug is None:
            debug = self.debug
        if not debug:
            self._run(steps, env, result, trace=False)
            return result

        with execution_context(self.name):
            finished = self._run(steps, env, result, trace=True)
            self.logger.info("Rule set finished" if finished else "Rule set aborted", ruleset=self.name)
        return result

    def _run(self, steps: Tuple[Step, ...], env: TEnv, result: TResult, trace: bool) -> bool:
        """Walk the steps; return False when a step aborted the walk."""
        for index, step in enumerate(steps):
            if trace:
                self._trace(index, step)
            if step.kind is StepKind.PRECONDITION:
                if not step.test(env, result):
                    return False
            elif step.kind is StepKind.RULE:
                if step.does_apply(env) and _aborts(step.apply(env, result)):
                    return False
        return True

    def _trace(self, index: int, step: Step) -> None:
        if self.sink is not None:
            self.sink(f"Executing step {step.display_name}")
        else:
            self.logger.info("Executing step", step=step.display_name, index=index)

    def _validate_steps(self, steps: Sequence[Step]) -> Tuple[Step, ...]:
        """Freeze the steps, rejecting anything that is not a step."""
        frozen = tuple(steps)
        for index, step in enumerate(frozen):
            if not isinstance(step, (Precondition, Rule)):
                raise InvalidStepError(
                    f"Step {index} of {self.name} is not a Precondition or Rule",
                    details={"index": index, "type": type(step).__name__}
                )
            if not step.display_name:
                raise InvalidStepError(
                    f"Step {index} of {self.name} has no display name",
                    details={"index": index}
                )
        return frozen


class RuleSet(BaseRuleSet[TEnv, TResult]):
    """Rule set built from an explicit step sequence and result factory."""

    def __init__(self,
                 steps: Sequence[Step],
                 result_factory: Callable[[], TResult] = NoResult,
                 name: Optional[str] = None,
                 debug: Optional[bool] = None,
                 sink: Optional[DiagnosticSink] = None):
        super().__init__(debug=debug, sink=sink)
        self._rules = tuple(steps)
        self._result_factory = result_factory
        self._name = name

    @property
    def name(self) -> str:
        return self._name or super().name

    def get_rules(self) -> Sequence[Step]:
        return self._rules

    def init_result(self) -> TResult:
        return self._result_factory()


def _aborts(outcome) -> bool:
    """Only Outcome.ABORT or a literal False stop the walk."""
    return outcome is Outcome.ABORT or outcome is False
