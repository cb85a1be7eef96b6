from itertools import islice

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pyprop.Gen import (
    Gen, boolean, choose, choose_pair, double, elements, list_of, list_of1,
    list_of_n, random_stream, string, union, unit, weighted,
)
from pyprop.RNG import SimpleRNG, ints, next_int

seeds = st.integers()


def take(g, rng, k):
    return list(islice(random_stream(g, rng), k))


# --- choose ---

@given(seeds, st.integers(min_value=-10**6, max_value=10**6), st.integers(min_value=1, max_value=10**6))
def test_choose_in_range(seed, lo, span):
    hi = lo + span
    for v in take(choose(lo, hi), SimpleRNG(seed), 20):
        assert lo <= v < hi


def test_choose_single_value_range(rng):
    assert set(take(choose(5, 6), rng, 10)) == {5}


@pytest.mark.parametrize("lo, hi", [(0, 0), (3, 1)])
def test_choose_empty_range(lo, hi):
    with pytest.raises(ValueError):
        choose(lo, hi)


def test_choose_covers_small_range(rng):
    assert set(take(choose(0, 4), rng, 200)) == {0, 1, 2, 3}


def test_choose_pair(rng):
    for a, b in take(choose_pair(0, 3), rng, 20):
        assert 0 <= a < 3 and 0 <= b < 3


# --- listOfN ---

@given(seeds, st.integers(min_value=0, max_value=50))
def test_list_of_n_length(seed, n):
    xs, _ = list_of_n(n, choose(0, 100)).run(SimpleRNG(seed))
    assert len(xs) == n


@given(seeds, st.integers(min_value=0, max_value=30))
def test_list_of_n_keeps_draw_order(seed, n):
    rng = SimpleRNG(seed)
    assert list_of_n(n, Gen(next_int)).run(rng) == ints(n, rng)


def test_list_of_n_zero_keeps_rng(rng):
    assert list_of_n(0, choose(0, 10)).run(rng) == ([], rng)


def test_list_of_n_negative():
    with pytest.raises(ValueError):
        list_of_n(-1, choose(0, 10))


@given(seeds)
def test_list_of_n_draws_count_first(seed):
    rng = SimpleRNG(seed)
    gn = choose(0, 10)
    ga = choose(0, 1000)

    count, after_count = gn.run(rng)
    expected = list_of_n(count, ga).run(after_count)

    assert list_of_n(gn, ga).run(rng) == expected
    assert len(expected[0]) == count


# --- flatMap ---

@given(seeds)
def test_flat_map_dependent_generation(seed):
    g = choose(1, 10).flat_map(lambda n: list_of_n(n, unit(n)))
    xs, _ = g.run(SimpleRNG(seed))
    assert xs == [len(xs)] * len(xs)


@given(seeds)
def test_flat_map_does_not_rerun_first_draw(seed):
    rng = SimpleRNG(seed)
    first, after = Gen(next_int).run(rng)
    value, _ = Gen(next_int).flat_map(lambda a: Gen(next_int).map(lambda b: (a, b))).run(rng)
    assert value == (first, after.next_int()[0])


# --- union / weighted ---

@given(seeds)
def test_union_follows_coin(seed):
    rng = SimpleRNG(seed)
    coin, _ = choose(0, 2).run(rng)
    picked, _ = union(unit("a"), unit("b")).run(rng)
    assert picked == ("a" if coin == 0 else "b")


def test_union_operator(rng):
    g = unit(1) | unit(2)
    assert take(g, rng, 50) == take(union(unit(1), unit(2)), rng, 50)
    assert set(take(g, rng, 50)) == {1, 2}


@given(seeds)
def test_weighted_all_on_first(seed):
    g = weighted((unit("a"), 1.0), (unit("b"), 0.0))
    assert set(take(g, SimpleRNG(seed), 20)) == {"a"}


@given(seeds)
def test_weighted_all_on_second(seed):
    g = weighted((unit("a"), 0.0), (unit("b"), 1.0))
    assert set(take(g, SimpleRNG(seed), 20)) == {"b"}


@given(seeds)
def test_weighted_uses_threshold(seed):
    rng = SimpleRNG(seed)
    p, _ = double().run(rng)
    picked, _ = weighted((unit("a"), 3), (unit("b"), 1)).run(rng)
    assert picked == ("a" if p < 0.75 else "b")


def test_weighted_ignores_sign(rng):
    g = weighted((unit("a"), -2.0), (unit("b"), 0.0))
    assert set(take(g, rng, 20)) == {"a"}


def test_weighted_zero_weights():
    with pytest.raises(ValueError):
        weighted((unit("a"), 0.0), (unit("b"), -0.0))


# --- misc generators ---

def test_elements(rng):
    assert set(take(elements(["x", "y"]), rng, 50)) == {"x", "y"}


def test_elements_empty():
    with pytest.raises(ValueError):
        elements([])


@given(seeds, st.integers(min_value=0, max_value=20))
def test_string_length_and_alphabet(seed, n):
    s = string(n).sample(SimpleRNG(seed))
    assert len(s) == n
    assert all("a" <= c <= "z" for c in s)


def test_boolean_produces_both(rng):
    assert set(take(boolean(), rng, 50)) == {True, False}


def test_unit_consumes_nothing(rng):
    assert unit(3).run(rng) == (3, rng)


def test_sized_lists(rng):
    assert len(list_of(choose(0, 5))(7).sample(rng)) == 7
    assert len(list_of1(choose(0, 5))(0).sample(rng)) == 1
    assert list_of(unit(1)).map(len)(4).sample(rng) == 4
    assert unit("u").unsized()(123).sample(rng) == "u"


def test_sized_flat_map_shares_size(rng):
    g = list_of(unit(0)).flat_map(lambda xs: list_of(unit(len(xs))))
    assert g(3).sample(rng) == [3, 3, 3]


@given(seeds)
def test_random_stream_threads_rng(seed):
    rng = SimpleRNG(seed)
    assert take(Gen(next_int), rng, 5) == ints(5, rng)[0]
