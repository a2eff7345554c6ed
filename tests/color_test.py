import pytest

from figma_gradient.models import Color
from figma_gradient.utils.color import ColorUtils


class TestFormatColor:

    def test_opaque_white_is_named(self):
        assert ColorUtils.format_color(Color(1, 1, 1), 1) == "white"

    def test_opaque_black_is_named(self):
        assert ColorUtils.format_color(Color(0, 0, 0), 1) == "black"

    def test_opaque_color_is_uppercase_hex(self):
        assert ColorUtils.format_color(Color(1, 0, 0), 1) == "#FF0000"

    def test_hex_channels_are_rounded(self):
        """0.2 * 255 = 51, 0.5 * 255 = 127.5 -> 128."""
        assert ColorUtils.format_color(Color(0.2, 0.5, 0.8), 1) == "#3380CC"

    def test_translucent_color_is_rgba(self):
        assert ColorUtils.format_color(Color(1, 0, 0), 0.5) == "rgba(255, 0, 0, 0.5)"

    def test_translucent_white_is_not_named(self):
        assert ColorUtils.format_color(Color(1, 1, 1), 0.25) == "rgba(255, 255, 255, 0.25)"

    def test_rgba_keeps_fractions(self):
        """Дробные каналы остаются, лишние нули отбрасываются."""
        assert ColorUtils.format_color(Color(0.5, 0.25, 0), 0.25) == "rgba(127.5, 63.75, 0, 0.25)"

    def test_fully_transparent(self):
        assert ColorUtils.format_color(Color(0, 0, 1), 0) == "rgba(0, 0, 255, 0)"

    def test_default_alpha_is_opaque(self):
        assert ColorUtils.format_color(Color(0, 1, 0)) == "#00FF00"


class TestParseColor:

    def test_parse_full_color(self):
        assert ColorUtils.parse_color({"r": 0.1, "g": 0.2, "b": 0.3, "a": 0.4}) == Color(0.1, 0.2, 0.3, 0.4)

    @pytest.mark.parametrize("raw", [{}, {"r": 1}])
    def test_missing_channels_default(self, raw):
        """Отсутствующие каналы: 0, альфа: 1."""
        color = ColorUtils.parse_color(raw)

        assert color.g == 0
        assert color.b == 0
        assert color.a == 1
