import logging
import time
import traceback
from dataclasses import dataclass, replace
from functools import reduce
from itertools import islice
from typing import Any, Callable, Optional, TypeVar, Union

from .Gen import Gen, SGen, random_stream
from .RNG import RNG, SimpleRNG

logger = logging.getLogger(__name__)

A = TypeVar('A')

DEFAULT_TEST_CASES = 100
DEFAULT_MAX_SIZE = 100

TestCases = int
SuccessCount = int
FailedCase = str


@dataclass(frozen=True)
class Passed:
    """No counterexample was found."""
    def is_falsified(self) -> bool:
        return False


@dataclass(frozen=True)
class Falsified:
    """A counterexample, plus how many cases passed before it was found."""
    failure: FailedCase
    successes: SuccessCount

    def is_falsified(self) -> bool:
        return True


Result = Union[Passed, Falsified]

PASSED = Passed()


class Prop:
    """
    A property: given a number of test cases and a random source, report
    whether a counterexample exists.

    Combinators only route the same ``(test_cases, rng)`` pair to the
    sub-properties. They never draw from the RNG themselves, so a composed
    property is exactly as deterministic as its parts.
    """
    def __init__(self, run_fn: Callable[[TestCases, RNG], Result]):
        self.run_fn = run_fn

    def run(self, test_cases: TestCases, rng: RNG) -> Result:
        return self.run_fn(test_cases, rng)

    def __call__(self, test_cases: TestCases, rng: RNG) -> Result:
        return self.run_fn(test_cases, rng)

    @staticmethod
    def passed() -> 'Prop':
        return Prop(lambda n, rng: PASSED)

    @staticmethod
    def falsified(failure: FailedCase, successes: SuccessCount = 0) -> 'Prop':
        return Prop(lambda n, rng: Falsified(failure, successes))

    # Conjunction (&&)
    def and_(self, other: 'Prop') -> 'Prop':
        def run(n: TestCases, rng: RNG) -> Result:
            result = self.run_fn(n, rng)
            if isinstance(result, Falsified):
                # Short-circuit: other is never evaluated
                return result
            return other.run(n, rng)
        return Prop(run)

    def __and__(self, other: 'Prop') -> 'Prop':
        return self.and_(other)

    # Disjunction (||)
    def or_(self, other: 'Prop') -> 'Prop':
        def run(n: TestCases, rng: RNG) -> Result:
            result = self.run_fn(n, rng)
            if isinstance(result, Falsified):
                # If other fails too, its report is prefixed with ours
                return other.tag(result.failure).run(n, rng)
            return result
        return Prop(run)

    def __or__(self, other: 'Prop') -> 'Prop':
        return self.or_(other)

    # Label (<?>)
    def tag(self, msg: str) -> 'Prop':
        """Prefix any failure description with ``msg``."""
        def run(n: TestCases, rng: RNG) -> Result:
            result = self.run_fn(n, rng)
            if isinstance(result, Falsified):
                return Falsified(f"{msg}: {result.failure}", result.successes)
            return result
        return Prop(run)


def _build_message(a: Any, e: Exception) -> str:
    stack = ''.join(traceback.format_exception(type(e), e, e.__traceback__))
    return (
        f"test case: {a}\n"
        f"generated an exception: {e!r}\n"
        f"stack trace:\n{stack}"
    )


def for_all(ga: Gen[A], predicate: Callable[[A], Any]) -> Prop:
    """
    Check ``predicate`` against up to ``test_cases`` values drawn from ``ga``.

    Stops at the first counterexample. A predicate passes by returning a
    truthy value or ``None`` (so plain ``assert`` functions work); returning
    any other falsy value, or raising, falsifies the property.
    """
    def run(n: TestCases, rng: RNG) -> Result:
        for i, a in enumerate(islice(random_stream(ga, rng), n)):
            try:
                outcome = predicate(a)
            except Exception as e:
                logger.debug(f"Predicate raised on test case {a!r}", exc_info=True)
                return Falsified(_build_message(a, e), i)
            if outcome is not None and not outcome:
                return Falsified(str(a), i)
        return PASSED
    return Prop(run)


def for_all_sized(g: SGen[A], predicate: Callable[[A], Any], max_size: int = DEFAULT_MAX_SIZE) -> Prop:
    """
    Check ``predicate`` against sized generators of size 0 up to ``max_size - 1``.

    The case budget is spread evenly over the sizes; each size gets
    ``ceil(test_cases / max_size)`` cases and the per-size properties are
    conjoined, so the smallest failing size is the one reported.
    """
    def run(n: TestCases, rng: RNG) -> Result:
        cases_per_size = (n + (max_size - 1)) // max_size
        sizes = range(min(n, max_size))
        if not sizes:
            return PASSED

        def at_size(size: int) -> Prop:
            p = for_all(g(size), predicate)
            return Prop(lambda _, r: p.run(cases_per_size, r))

        return reduce(Prop.and_, [at_size(size) for size in sizes]).run(n, rng)
    return Prop(run)


@dataclass(frozen=True)
class CheckConfig:
    """
    Settings for ``run_prop``. A ``None`` seed means "seed from the clock";
    the seed actually used is logged so the run can be replayed.
    """
    test_cases: int = DEFAULT_TEST_CASES
    seed: Optional[int] = None


def run_prop(prop: Prop, config: Optional[CheckConfig] = None, **overrides: Any) -> Result:
    """Evaluate ``prop`` once, log the outcome and return the Result."""
    config = replace(config or CheckConfig(), **overrides)
    seed = config.seed if config.seed is not None else time.time_ns()
    logger.debug(f"Checking property over {config.test_cases} cases with seed {seed}")

    result = prop.run(config.test_cases, SimpleRNG(seed))

    if isinstance(result, Falsified):
        logger.warning(f"! Falsified after {result.successes} passed tests:\n {result.failure}")
    else:
        logger.info(f"+ OK, passed {config.test_cases} tests.")
    return result
