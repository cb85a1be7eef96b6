from string import ascii_lowercase
from typing import Callable, Generic, Iterator, List, Sequence, Tuple, TypeVar, Union

from .RNG import RNG, non_negative_int
from .RNG import boolean as _rng_boolean
from .RNG import double as _rng_double
from .State import State

A = TypeVar('A')
B = TypeVar('B')


class Gen(State[RNG, A]):
    """
    A composable recipe for pseudo-random values.

    A Gen is a State threading an RNG, so ``map``, ``flat_map``, ``map2`` and
    ``sequence`` come straight from State and return Gen instances.
    """

    def sample(self, rng: RNG) -> A:
        """Draw a single value, discarding the successor RNG."""
        return self.run(rng)[0]

    # Union (<|>)
    def __or__(self, other: 'Gen[A]') -> 'Gen[A]':
        return union(self, other)

    def unsized(self) -> 'SGen[A]':
        """Lift into a sized generator that ignores the size."""
        return SGen(lambda _: self)


class SGen(Generic[A]):
    """A generator indexed by a size, e.g. the length of a generated list."""

    def __init__(self, for_size: Callable[[int], Gen[A]]):
        self.for_size = for_size

    def __call__(self, size: int) -> Gen[A]:
        return self.for_size(size)

    def map(self, f: Callable[[A], B]) -> 'SGen[B]':
        return SGen(lambda n: self.for_size(n).map(f))

    def flat_map(self, f: Callable[[A], 'SGen[B]']) -> 'SGen[B]':
        # The same size drives both stages
        return SGen(lambda n: self.for_size(n).flat_map(lambda a: f(a).for_size(n)))


# 1. unit: Always produces the same value, consumes no randomness
def unit(a: A) -> Gen[A]:
    return Gen.unit(a)


# 2. boolean: Fair coin
def boolean() -> Gen[bool]:
    return Gen(_rng_boolean)


# 3. double: Uniform in [0, 1)
def double() -> Gen[float]:
    return Gen(_rng_double)


# 4. choose: Uniform integer in [lo, hi)
def choose(lo: int, hi: int) -> Gen[int]:
    """
    Uniform integer draw with ``lo <= v < hi``.

    Requires ``hi > lo``; an empty range raises ValueError.
    """
    if hi <= lo:
        raise ValueError(f"choose: empty range [{lo}, {hi})")
    span = hi - lo
    return Gen(non_negative_int).map(lambda n: n % span + lo)


# 5. choosePair: Two independent draws from the same range
def choose_pair(lo: int, hi: int) -> Gen[Tuple[int, int]]:
    return choose(lo, hi).map2(choose(lo, hi), lambda a, b: (a, b))


# 6. listOfN: Exactly n values, fixed or drawn from a Gen[int]
def list_of_n(n: Union[int, Gen[int]], ga: Gen[A]) -> Gen[List[A]]:
    """
    Generate a list of ``n`` values by running ``ga`` ``n`` times in order.

    When ``n`` is itself a generator, the count is drawn first and every
    element is drawn after it.
    """
    if isinstance(n, State):
        return n.flat_map(lambda k: list_of_n(k, ga))
    if n < 0:
        raise ValueError(f"list_of_n: negative length {n}")
    return Gen.sequence([ga] * n)


# 7. elements: Uniform pick from a non-empty sequence
def elements(items: Sequence[A]) -> Gen[A]:
    pool = tuple(items)
    if not pool:
        raise ValueError("elements: no items to choose from")
    return choose(0, len(pool)).map(lambda i: pool[i])


# 8. string: Lowercase ASCII strings of a given length
def string(n: Union[int, Gen[int]]) -> Gen[str]:
    return list_of_n(n, elements(ascii_lowercase)).map(''.join)


# 9. union: Equal-probability choice between two generators
def union(ga: Gen[A], gb: Gen[A]) -> Gen[A]:
    return choose(0, 2).flat_map(lambda i: ga if i == 0 else gb)


# 10. weighted: Biased choice between two generators
def weighted(pga: Tuple[Gen[A], float], pgb: Tuple[Gen[A], float]) -> Gen[A]:
    """
    Pick ``ga`` with probability ``|w1| / (|w1| + |w2|)``, otherwise ``gb``.

    Weights are unnormalized and their sign is ignored. At least one weight
    must be non-zero; two zero weights raise ValueError.
    """
    ga, w1 = pga
    gb, w2 = pgb
    total = abs(w1) + abs(w2)
    if total == 0:
        raise ValueError("weighted: at least one weight must be non-zero")
    threshold = abs(w1) / total
    return double().flat_map(lambda p: ga if p < threshold else gb)


# 11. listOf: Sized lists, the size being the length
def list_of(ga: Gen[A]) -> SGen[List[A]]:
    return SGen(lambda n: list_of_n(n, ga))


# 12. listOf1: Sized lists that are never empty
def list_of1(ga: Gen[A]) -> SGen[List[A]]:
    return SGen(lambda n: list_of_n(max(n, 1), ga))


def random_stream(ga: Gen[A], rng: RNG) -> Iterator[A]:
    """Infinite stream of samples, each drawn from the previous draw's successor."""
    current = rng
    while True:
        a, current = ga.run(current)
        yield a
