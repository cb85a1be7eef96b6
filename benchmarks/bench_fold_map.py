"""
Benchmark: balanced fold_map vs a strict left fold vs par_fold_map.

Measures wall-clock time for folding inputs of increasing size with the
string and word-count monoids.

Usage:
    python benchmarks/bench_fold_map.py
"""

import timeit
from functools import reduce

from pyprop.Monoid import fold_map, par_fold_map, string_monoid
from pyprop.WordCount import char_to_wc, wc_monoid


def bench_left_fold_strings(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Baseline: reduce() over short strings."""
    results = {}
    for n in sizes:
        data = ["ab"] * n
        t = timeit.timeit(lambda: reduce(string_monoid.combine, data, string_monoid.nil), number=repeats)
        results[n] = t / repeats
    return results


def bench_fold_map_strings(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """Balanced fold_map over short strings; avoids the quadratic copy of a left fold."""
    results = {}
    for n in sizes:
        data = ["ab"] * n
        t = timeit.timeit(lambda: fold_map(data, string_monoid, lambda s: s), number=repeats)
        results[n] = t / repeats
    return results


def bench_word_count(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """fold_map with the WC monoid over n words of text."""
    results = {}
    for n in sizes:
        text = "lorem " * n
        t = timeit.timeit(lambda: fold_map(text, wc_monoid, char_to_wc), number=repeats)
        results[n] = t / repeats
    return results


def bench_par_word_count(sizes: list[int], repeats: int = 5) -> dict[int, float]:
    """par_fold_map with the WC monoid over 4 chunks."""
    results = {}
    for n in sizes:
        text = "lorem " * n
        t = timeit.timeit(lambda: par_fold_map(text, wc_monoid, char_to_wc, chunks=4), number=repeats)
        results[n] = t / repeats
    return results


def format_time(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:8.1f} us"
    elif seconds < 1:
        return f"{seconds * 1e3:8.2f} ms"
    else:
        return f"{seconds:8.3f}  s"


def print_results(name: str, results: dict[int, float]) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}")
    print(f"  {'Size':>10}  {'Time':>12}  {'Ratio vs smallest':>18}")
    print(f"  {'-'*10}  {'-'*12}  {'-'*18}")

    baseline = list(results.values())[0]
    for size, elapsed in results.items():
        ratio = elapsed / baseline if baseline > 0 else 0
        print(f"  {size:>10,}  {format_time(elapsed)}  {ratio:>17.1f}x")


def main() -> None:
    sizes = [1_000, 5_000, 10_000, 50_000, 100_000]
    text_sizes = [200, 1_000, 5_000, 10_000, 20_000]

    print("pyprop fold Benchmark")
    print("=" * 60)

    suites = [
        ("reduce (strings)", bench_left_fold_strings, sizes),
        ("fold_map (strings)", bench_fold_map_strings, sizes),
        ("fold_map (word count)", bench_word_count, text_sizes),
        ("par_fold_map (word count)", bench_par_word_count, text_sizes),
    ]

    for name, fn, sz in suites:
        results = fn(sz)
        print_results(name, results)

    print()


if __name__ == "__main__":
    main()
