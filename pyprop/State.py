from typing import Callable, Generic, Iterable, List, Tuple, TypeVar

S = TypeVar('S')  # Threaded state
A = TypeVar('A')  # Produced value
B = TypeVar('B')
C = TypeVar('C')

Transition = Callable[[S], Tuple[A, S]]
# s -> (value, next_state)


class State(Generic[S, A]):
    """
    A computation that produces a value while threading a state.

    Combinators never run anything: they build a new transition function out
    of existing ones. Results are constructed with ``type(self)``, so
    subclasses (``Gen``) get ``map``/``flat_map``/``map2``/``sequence`` back
    as their own type without redefining them.
    """
    def __init__(self, run_fn: Transition):
        self.run_fn = run_fn

    def run(self, s: S) -> Tuple[A, S]:
        return self.run_fn(s)

    def __call__(self, s: S) -> Tuple[A, S]:
        return self.run_fn(s)

    @classmethod
    def unit(cls, a: A) -> 'State[S, A]':
        """Produce ``a`` and leave the state untouched."""
        return cls(lambda s: (a, s))

    def map(self, f: Callable[[A], B]) -> 'State[S, B]':
        def run(s: S) -> Tuple[B, S]:
            a, s1 = self.run_fn(s)
            return f(a), s1
        return type(self)(run)

    # Monadic bind (>>=)
    def flat_map(self, f: Callable[[A], 'State[S, B]']) -> 'State[S, B]':
        def run(s: S) -> Tuple[B, S]:
            a, s1 = self.run_fn(s)
            # The continuation only ever sees the successor state
            return f(a).run(s1)
        return type(self)(run)

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[A], 'State[S, B]']) -> 'State[S, B]':
        return self.flat_map(f)

    def map2(self, other: 'State[S, B]', f: Callable[[A, B], C]) -> 'State[S, C]':
        """Run ``self`` then ``other`` and combine both values with ``f``."""
        def run(s: S) -> Tuple[C, S]:
            a, s1 = self.run_fn(s)
            b, s2 = other.run(s1)
            return f(a, b), s2
        return type(self)(run)

    @classmethod
    def sequence(cls, states: Iterable['State[S, A]']) -> 'State[S, List[A]]':
        """
        Thread the state through every element in order.

        Results come back in input order. An empty input produces ``[]`` and
        hands the state back unchanged.
        """
        steps = list(states)

        def run(s: S) -> Tuple[List[A], S]:
            results: List[A] = []
            current = s
            for step in steps:
                value, current = step.run(current)
                results.append(value)
            return results, current
        return cls(run)

    @classmethod
    def get(cls) -> 'State[S, S]':
        return cls(lambda s: (s, s))

    @classmethod
    def set(cls, s: S) -> 'State[S, None]':
        return cls(lambda _: (None, s))

    @classmethod
    def modify(cls, f: Callable[[S], S]) -> 'State[S, None]':
        return cls.get().flat_map(lambda s: cls.set(f(s)))

    def eval(self, s: S) -> A:
        """Run and keep only the value."""
        return self.run_fn(s)[0]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.run_fn!r})"


def run_state(state: State[S, A], initial: S) -> Tuple[A, S]:
    return state.run(initial)

