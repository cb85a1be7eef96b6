import logging

from pyprop.Gen import choose, list_of, list_of1, weighted
from pyprop.Prop import CheckConfig, for_all_sized, run_prop

# 1. Generators
# Small integers most of the time, with an occasional large one
small_int = choose(-10, 10)
big_int = choose(-1_000_000, 1_000_000)
ints = weighted((small_int, 0.9), (big_int, 0.1))

int_lists = list_of(ints)
non_empty_int_lists = list_of1(ints)

# 2. Properties
max_is_an_upper_bound = for_all_sized(
    non_empty_int_lists,
    lambda xs: all(x <= max(xs) for x in xs),
).tag("max")

sorted_is_ordered = for_all_sized(
    int_lists,
    lambda xs: all(a <= b for a, b in zip(sorted(xs), sorted(xs)[1:])),
).tag("sorted")

# A property that does not hold: reversing changes a list
reverse_is_identity = for_all_sized(
    int_lists,
    lambda xs: list(reversed(xs)) == xs,
).tag("reverse")

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    config = CheckConfig(test_cases=200, seed=20240601)

    run_prop(max_is_an_upper_bound & sorted_is_ordered, config)
    run_prop(reverse_is_identity, config)
