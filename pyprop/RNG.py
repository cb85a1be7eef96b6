from dataclasses import dataclass
from typing import List, Protocol, Tuple, TypeVar

A = TypeVar('A')

INT_MAX = 0x7FFFFFFF
INT_MIN = -0x80000000

_MULTIPLIER = 0x5DEECE66D
_INCREMENT = 0xB
_MASK = 0xFFFFFFFFFFFF  # 48-bit seed space


class RNG(Protocol):
    """A pure random source: every draw returns a value and the successor source."""
    def next_int(self) -> Tuple[int, 'RNG']:
        ...


def _to_int32(n: int) -> int:
    # Reinterpret the low 32 bits as a two's-complement signed integer
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n > INT_MAX else n


@dataclass(frozen=True)
class SimpleRNG:
    """
    Linear congruential generator over a 48-bit seed.

    Immutable: ``next_int`` never touches ``self``, it hands back a new
    SimpleRNG holding the next seed. Two generators built from the same seed
    always produce the same sequence.
    """
    seed: int

    def next_int(self) -> Tuple[int, 'SimpleRNG']:
        new_seed = (self.seed * _MULTIPLIER + _INCREMENT) & _MASK
        value = _to_int32(new_seed >> 16)
        return value, SimpleRNG(new_seed)


# Derived draws. Each one is a transition RNG -> (value, RNG) so it can be
# lifted straight into a State/Gen.

def next_int(rng: RNG) -> Tuple[int, RNG]:
    """Raw signed 32-bit draw."""
    return rng.next_int()


def non_negative_int(rng: RNG) -> Tuple[int, RNG]:
    """Draw in [0, INT_MAX]. Clears the sign bit, so INT_MIN maps to 0."""
    i, rng2 = rng.next_int()
    return i & INT_MAX, rng2


def double(rng: RNG) -> Tuple[float, RNG]:
    """Draw in [0, 1)."""
    i, rng2 = non_negative_int(rng)
    return i / (INT_MAX + 1.0), rng2


def boolean(rng: RNG) -> Tuple[bool, RNG]:
    i, rng2 = non_negative_int(rng)
    return i % 2 == 0, rng2


def ints(count: int, rng: RNG) -> Tuple[List[int], RNG]:
    """Draw ``count`` raw integers in order, returning them with the final successor."""
    results: List[int] = []
    current = rng
    for _ in range(count):
        i, current = current.next_int()
        results.append(i)
    return results, current
