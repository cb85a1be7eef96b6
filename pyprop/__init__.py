# Random source
from .RNG import RNG, SimpleRNG, non_negative_int, INT_MAX, INT_MIN

# State threading
from .State import State, run_state

# Generators
from .Gen import (
    Gen, SGen,
    unit, boolean, double, choose, choose_pair,
    list_of_n, list_of, list_of1, elements, string,
    union, weighted, random_stream
)

# Properties
from .Prop import (
    Prop, Result, Passed, Falsified, PASSED,
    for_all, for_all_sized,
    CheckConfig, run_prop, DEFAULT_TEST_CASES, DEFAULT_MAX_SIZE
)

# Monoids
from .Monoid import (
    Monoid, fold_map, concatenate, fold_left, fold_right, par_fold_map, monoid_laws,
    string_monoid, list_monoid, int_addition, int_multiplication,
    boolean_or, boolean_and, option_monoid, endo_monoid, dual, product_monoid
)

# Word counting
from .WordCount import WC, Stub, Part, wc_monoid, char_to_wc, count_words, word_count
