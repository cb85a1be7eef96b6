from dataclasses import dataclass
from typing import Union

from .Monoid import Monoid, fold_map


@dataclass(frozen=True)
class Stub:
    """A run of non-whitespace characters with no word boundary seen yet."""
    chars: str


@dataclass(frozen=True)
class Part:
    """
    ``words`` complete words bounded by whitespace, with the partial
    fragments ``ls`` and ``rs`` hanging off the left and right edges.
    """
    ls: str
    words: int
    rs: str


WC = Union[Stub, Part]


def _combine(a1: WC, a2: WC) -> WC:
    if isinstance(a1, Stub):
        if isinstance(a2, Stub):
            return Stub(a1.chars + a2.chars)
        return Part(a1.chars + a2.ls, a2.words, a2.rs)
    if isinstance(a2, Stub):
        return Part(a1.ls, a1.words, a1.rs + a2.chars)
    # The fragments meeting in the middle form one word, if there is anything there
    joined = 1 if a1.rs + a2.ls else 0
    return Part(a1.ls, a1.words + a2.words + joined, a2.rs)


wc_monoid: Monoid[WC] = Monoid(_combine, Stub(""))


def char_to_wc(c: str) -> WC:
    if c.isspace():
        return Part("", 0, "")
    return Stub(c)


def _unstub(s: str) -> int:
    return 1 if s else 0


def count_words(wc: WC) -> int:
    """Total words in a folded WC: inner words plus any non-empty edge fragment."""
    if isinstance(wc, Stub):
        return _unstub(wc.chars)
    return _unstub(wc.ls) + wc.words + _unstub(wc.rs)


def word_count(s: str) -> int:
    """Count whitespace-separated words with a balanced fold over the characters."""
    return count_words(fold_map(s, wc_monoid, char_to_wc))
