"""
fonts.py - Count to Font Level Scaling

Maps each selected word's count onto an integer font level. The level is
linearly interpolated between the smallest and largest counts in the
selection, using floor division so results are reproducible.
"""

from tagcloud.errors import InvalidArgument

MIN_FONT = 11
MAX_FONT = 48
DEFAULT_FONT = 11


def font_level(count, min_count, max_count, min_font=MIN_FONT, max_font=MAX_FONT):
    """
    Font level of a single count, given the count range of the selection.

    Callers handle the min_count == max_count case; the interpolation is
    undefined there.
    """
    font = max_font - (max_count - count) * (max_font - min_font) // (max_count - min_count)
    return max(font, min_font)


def scale_fonts(selection, min_font=MIN_FONT, max_font=MAX_FONT, default_font=DEFAULT_FONT):
    """
    Assign a font level to every (word, count) pair of the selection.

    Args:
        selection: Non-empty sequence of (word, count) pairs
        min_font: Smallest font level, given to the lowest count
        max_font: Largest font level, given to the highest count
        default_font: Level used for every word when all counts are equal

    Returns:
        Dict mapping each selected word to its font level

    Raises:
        InvalidArgument: If the selection is empty, the font bounds are
            inverted, or default_font lies outside them
    """
    if not selection:
        raise InvalidArgument("selection", "must contain at least one word")
    if min_font > max_font:
        raise InvalidArgument(
            "min_font", f"{min_font} is larger than max_font {max_font}")
    if not min_font <= default_font <= max_font:
        raise InvalidArgument(
            "default_font", f"{default_font} is outside [{min_font}, {max_font}]")

    counts = [count for _, count in selection]
    max_count = max(counts)
    min_count = min(counts)

    if max_count == min_count:
        return {word: default_font for word, _ in selection}

    return {
        word: font_level(count, min_count, max_count, min_font, max_font)
        for word, count in selection
    }
