"""
ranking.py - Top-N Selection and Alphabetical Ordering

Two views of the same selection are needed: the count-ordered view picks
which words make it into the cloud, and the alphabetical view decides the
order they are rendered in.
"""

from tagcloud.errors import InvalidArgument


def by_count(item):
    """
    Sort key for (word, count) pairs: highest count first, ties broken by
    case-insensitive word text so the selection is reproducible.
    """
    word, count = item
    return (-count, word.lower(), word)


def by_word(item):
    """Sort key for (word, count) pairs: case-insensitive word text."""
    word, _ = item
    return (word.lower(), word)


def rank_by_count(frequencies):
    """
    Return every (word, count) pair ordered by by_count.

    Runtime Complexity: O(U log U) where U is the number of distinct words.
    """
    return sorted(frequencies.items(), key=by_count)


def select_top(frequencies, n):
    """
    Return the n highest-count (word, count) pairs, highest first.

    Raises:
        InvalidArgument: If n <= 0 or n exceeds the number of distinct words
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument("N", f"expected an integer, got {n!r}")
    if n <= 0:
        raise InvalidArgument("N", f"must be > 0, got {n}")
    if n > len(frequencies):
        raise InvalidArgument(
            "N", f"{n} exceeds the {len(frequencies)} distinct words available")
    return rank_by_count(frequencies)[:n]


def order_alphabetically(selection):
    """Return the selected pairs sorted by word, case-insensitive ascending."""
    return sorted(selection, key=by_word)
