"""
tokenizer.py - Word / Separator Tokenizer

Splits a text buffer into maximal runs of separator characters or
non-separator characters. Concatenating every token in order gives back
the original buffer exactly.
"""

from collections import namedtuple

from tagcloud.errors import InvalidArgument

WHITESPACE = " \t\n\r"

# Whitespace, punctuation and symbols that end a word
SEPARATORS = frozenset(WHITESPACE + ",-.!?[]';:/()*`\"=\\|+&^%$#@")

WORD = "WORD"
SEPARATOR = "SEPARATOR"

Token = namedtuple("Token", ["text", "kind"])


def next_word_or_separator(text, position, separators=SEPARATORS):
    """
    Return the maximal run starting at position that is entirely inside or
    entirely outside the separator set.

    Runtime Complexity: O(k) where k is the length of the returned run.
    Scanning stops at the first class boundary or at the end of the buffer.

    Raises:
        InvalidArgument: If position is not a valid index into text
    """
    if not 0 <= position < len(text):
        raise InvalidArgument(
            "position", f"{position} is outside [0, {len(text)})")

    is_sep = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == is_sep:
        end += 1
    return text[position:end]


def tokenize(text, separators=SEPARATORS):
    """
    Yield every token of text in order, starting at offset 0 and advancing
    by each token's length until the buffer is consumed.

    Runtime Complexity: O(n) where n is the number of characters in text.
    """
    position = 0
    while position < len(text):
        run = next_word_or_separator(text, position, separators)
        kind = SEPARATOR if run[0] in separators else WORD
        yield Token(run, kind)
        position += len(run)
