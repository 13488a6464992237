"""Unit tests for font level scaling."""

import pytest

from tagcloud.errors import InvalidArgument
from tagcloud.fonts import (
    DEFAULT_FONT,
    MAX_FONT,
    MIN_FONT,
    font_level,
    scale_fonts,
)


class TestScaleFonts:
    """Tests for scale_fonts."""

    def test_sample_selection(self):
        """Highest count gets MAX_FONT, lowest MIN_FONT, middle interpolated."""
        fonts = scale_fonts([("the", 3), ("cat", 2), ("mat", 1)])

        assert fonts == {"the": 48, "cat": 30, "mat": 11}

    def test_equal_counts_use_default_font(self):
        """With a single distinct count every word gets the default level."""
        fonts = scale_fonts([("a", 1), ("b", 1), ("c", 1)])

        assert fonts == {"a": DEFAULT_FONT, "b": DEFAULT_FONT, "c": DEFAULT_FONT}
        assert DEFAULT_FONT != MAX_FONT

    def test_single_word_uses_default_font(self):
        assert scale_fonts([("only", 42)]) == {"only": DEFAULT_FONT}

    def test_custom_default_font(self):
        fonts = scale_fonts([("a", 2), ("b", 2)], default_font=20)

        assert fonts == {"a": 20, "b": 20}

    def test_levels_stay_in_range(self):
        selection = [(f"w{i}", count) for i, count in enumerate(
            [1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 1000])]

        fonts = scale_fonts(selection)

        assert all(MIN_FONT <= level <= MAX_FONT for level in fonts.values())
        assert fonts["w11"] == MAX_FONT
        assert fonts["w0"] == MIN_FONT

    def test_levels_are_monotonic_in_count(self):
        selection = [("a", 10), ("b", 7), ("c", 7), ("d", 4), ("e", 1)]

        fonts = scale_fonts(selection)
        levels = [fonts[w] for w, _ in selection]

        assert levels == sorted(levels, reverse=True)
        assert fonts["b"] == fonts["c"]

    def test_floor_division_is_preserved(self):
        """48 - (10 - 4) * 37 // 9 = 48 - 24 = 24."""
        fonts = scale_fonts([("a", 10), ("b", 4), ("c", 1)])

        assert fonts["b"] == 24

    def test_covers_exactly_the_selected_words(self):
        selection = [("x", 5), ("y", 3), ("z", 1)]

        assert set(scale_fonts(selection)) == {"x", "y", "z"}

    def test_custom_range(self):
        fonts = scale_fonts([("a", 4), ("b", 2), ("c", 0)], min_font=1, max_font=5)

        assert fonts == {"a": 5, "b": 3, "c": 1}

    def test_empty_selection_raises(self):
        with pytest.raises(InvalidArgument):
            scale_fonts([])

    def test_inverted_range_raises(self):
        with pytest.raises(InvalidArgument):
            scale_fonts([("a", 2), ("b", 1)], min_font=30, max_font=20)

    @pytest.mark.parametrize("default_font", [99, 10, 49])
    def test_default_font_outside_range_raises(self, default_font):
        """Equal counts can never produce a level outside the font range."""
        with pytest.raises(InvalidArgument) as exc_info:
            scale_fonts([("a", 1), ("b", 1)], default_font=default_font)

        assert exc_info.value.name == "default_font"


class TestFontLevel:
    """Tests for font_level."""

    @pytest.mark.parametrize("count,expected", [(100, 48), (1, 11), (50, 30)])
    def test_interpolates(self, count, expected):
        """48 - (100 - 50) * 37 // 99 = 48 - 18 = 30."""
        assert font_level(count, 1, 100) == expected

    def test_clamps_to_min_font(self):
        """Counts below the range never drop under the minimum level."""
        assert font_level(0, 5, 10) == MIN_FONT
