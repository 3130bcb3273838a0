"""Tests for text size measurement."""

from editkit.text.metrics import get_text_size


class TestGetTextSize:
    """Test width/height in character cells."""

    def test_empty_text_is_one_line(self):
        size = get_text_size("")
        assert (size.width(), size.height()) == (0, 1)

    def test_single_line(self):
        size = get_text_size("hello")
        assert (size.width(), size.height()) == (5, 1)

    def test_widest_line_wins(self):
        size = get_text_size("ab\nabcdef\nabc")
        assert (size.width(), size.height()) == (6, 3)

    def test_trailing_newline_adds_line(self):
        size = get_text_size("abc\n")
        assert (size.width(), size.height()) == (3, 2)

    def test_tab_is_four_columns(self):
        assert get_text_size("\tx").width() == 5

    def test_custom_tab_width(self):
        assert get_text_size("\tx", tab_width=8).width() == 9

    def test_carriage_return_is_zero_width(self):
        size = get_text_size("ab\r\ncd\r\n")
        assert (size.width(), size.height()) == (2, 3)
