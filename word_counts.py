# Lists every word of a document with its count, using the same
# tokenizer and ordering as the tag cloud.

import sys

from reader import read_source
from tagcloud.errors import TagCloudError
from tagcloud.frequency import compute_word_frequencies
from tagcloud.ranking import rank_by_count


def print_frequencies(frequencies, out=None):
    """
    Runtime Complexity: O(U log U)
    Where U is the number of unique words. Sorting dominates; printing is O(U).
    """
    out = out or sys.stdout
    for word, count in rank_by_count(frequencies):
        out.write(f"{word}\t{count}\n")


def cli(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) != 2:
        sys.stderr.write("Usage: word-counts <text_file>\n")
        return 2

    try:
        text = read_source(argv[1])
    except TagCloudError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1

    print_frequencies(compute_word_frequencies(text))
    return 0


if __name__ == "__main__":
    sys.exit(cli())
