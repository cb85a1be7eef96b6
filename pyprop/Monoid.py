import logging
import operator
import os
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from .Gen import Gen
from .Prop import Prop, for_all

logger = logging.getLogger(__name__)

A = TypeVar('A')
B = TypeVar('B')


@dataclass(frozen=True)
class Monoid(Generic[A]):
    """
    An associative ``combine`` with an identity element ``nil``.

    For all a, b, c:
        combine(nil, a) == a == combine(a, nil)
        combine(combine(a, b), c) == combine(a, combine(b, c))

    The laws are the caller's responsibility; nothing here checks them at
    run time. Use ``monoid_laws`` to test an instance.
    """
    combine: Callable[[A, A], A]
    nil: A


# -----------------------------------------------------------
# Standard instances
# -----------------------------------------------------------

string_monoid: Monoid[str] = Monoid(operator.add, "")

int_addition: Monoid[int] = Monoid(operator.add, 0)

int_multiplication: Monoid[int] = Monoid(operator.mul, 1)

boolean_or: Monoid[bool] = Monoid(lambda a, b: a or b, False)

boolean_and: Monoid[bool] = Monoid(lambda a, b: a and b, True)


def list_monoid() -> Monoid[List[A]]:
    # Fresh nil per call; callers may mutate what fold_map hands back
    return Monoid(operator.add, [])


def option_monoid() -> Monoid[Optional[A]]:
    """First non-None value wins."""
    return Monoid(lambda a, b: a if a is not None else b, None)


def endo_monoid() -> Monoid[Callable[[A], A]]:
    """Function composition: combine(f, g) is ``f after g``."""
    return Monoid(lambda f, g: lambda a: f(g(a)), lambda a: a)


def dual(m: Monoid[A]) -> Monoid[A]:
    """The same monoid with its arguments flipped."""
    return Monoid(lambda a, b: m.combine(b, a), m.nil)


def product_monoid(ma: Monoid[A], mb: Monoid[B]) -> Monoid[Tuple[A, B]]:
    return Monoid(
        lambda x, y: (ma.combine(x[0], y[0]), mb.combine(x[1], y[1])),
        (ma.nil, mb.nil),
    )


# -----------------------------------------------------------
# Folding
# -----------------------------------------------------------

def _fold_range(items: Sequence[A], lo: int, hi: int, m: Monoid[B], f: Callable[[A], B]) -> B:
    # Balanced fold over the half-open range [lo, hi); no slicing
    size = hi - lo
    if size == 0:
        return m.nil
    if size == 1:
        return f(items[lo])
    mid = lo + size // 2
    return m.combine(_fold_range(items, lo, mid, m, f), _fold_range(items, mid, hi, m, f))


def _as_sequence(items: Iterable[A]) -> Sequence[A]:
    return items if isinstance(items, Sequence) else list(items)


def fold_map(items: Iterable[A], m: Monoid[B], f: Callable[[A], B]) -> B:
    """
    Map every item with ``f`` and combine the results with ``m``, splitting
    the input in halves at each level (the left half gets ``len // 2``).

    An empty input gives ``m.nil`` without calling ``f``. For a lawful monoid
    the result equals the strict left-to-right fold; the two halves share no
    data, so they can be evaluated independently (see ``par_fold_map``).
    """
    seq = _as_sequence(items)
    return _fold_range(seq, 0, len(seq), m, f)


def concatenate(items: Iterable[A], m: Monoid[A]) -> A:
    return fold_map(items, m, lambda a: a)


def fold_right(items: Iterable[A], z: B, f: Callable[[A, B], B]) -> B:
    """f(a1, f(a2, ... f(an, z))), built with the endofunction monoid."""
    composed = fold_map(items, endo_monoid(), lambda a: lambda b: f(a, b))
    return composed(z)


def fold_left(items: Iterable[A], z: B, f: Callable[[B, A], B]) -> B:
    """f(... f(f(z, a1), a2) ..., an), built with the dual endofunction monoid."""
    composed = fold_map(items, dual(endo_monoid()), lambda a: lambda b: f(b, a))
    return composed(z)


def _fold_chunks(executor: Executor, seq: Sequence[A], bounds: List[Tuple[int, int]],
                 m: Monoid[B], f: Callable[[A], B]) -> List[B]:
    futures = [executor.submit(_fold_range, seq, lo, hi, m, f) for lo, hi in bounds]
    # Collected in submission order so the final combine keeps item order
    return [future.result() for future in futures]


def par_fold_map(items: Iterable[A], m: Monoid[B], f: Callable[[A], B],
                 executor: Optional[Executor] = None, chunks: Optional[int] = None) -> B:
    """
    ``fold_map`` with contiguous chunks folded concurrently.

    Each chunk is folded on ``executor`` (a private thread pool when none is
    given), then the partial results are combined in order. The answer equals
    ``fold_map`` only when ``m`` is associative.
    """
    seq = _as_sequence(items)
    size = len(seq)
    n_chunks = min(chunks or os.cpu_count() or 1, size)
    if n_chunks < 2:
        return fold_map(seq, m, f)

    bounds = [(i * size // n_chunks, (i + 1) * size // n_chunks) for i in range(n_chunks)]
    logger.debug(f"par_fold_map: {size} items in {n_chunks} chunks")

    if executor is None:
        with ThreadPoolExecutor(max_workers=n_chunks) as pool:
            partials = _fold_chunks(pool, seq, bounds, m, f)
    else:
        partials = _fold_chunks(executor, seq, bounds, m, f)
    return concatenate(partials, m)


def monoid_laws(m: Monoid[A], gen: Gen[A], eq: Callable[[A, A], bool] = operator.eq) -> Prop:
    """
    A property checking associativity and both identity laws of ``m`` over
    values drawn from ``gen``. ``eq`` compares results, for instances (like
    ``endo_monoid``) whose values have no useful ``==``.
    """
    triples = gen.map2(gen, lambda a, b: (a, b)).map2(gen, lambda ab, c: (ab[0], ab[1], c))

    def associative(t: Tuple[A, A, A]) -> bool:
        a, b, c = t
        return eq(m.combine(m.combine(a, b), c), m.combine(a, m.combine(b, c)))

    def identity(a: A) -> bool:
        return eq(m.combine(m.nil, a), a) and eq(m.combine(a, m.nil), a)

    return for_all(triples, associative).tag("associativity") & for_all(gen, identity).tag("identity")
