import logging
import sys

from pyprop.Monoid import par_fold_map
from pyprop.WordCount import char_to_wc, count_words, wc_monoid, word_count


def parallel_word_count(text: str, chunks: int = 4) -> int:
    # Same answer as word_count: the WC monoid is associative
    return count_words(par_fold_map(text, wc_monoid, char_to_wc, chunks=chunks))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            text = f.read()
    else:
        text = "lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do"

    print("Sequential:", word_count(text))
    print("Parallel:  ", parallel_word_count(text))
