import configuration as config
from figma_gradient.models import Color

from .number import NumberUtils


class ColorUtils:
    @staticmethod
    def parse_color(raw: dict) -> Color:
        """Figma color dict {'r', 'g', 'b', 'a'} with 0-1 channels -> Color."""
        return Color(
            r=float(raw.get("r", 0)),
            g=float(raw.get("g", 0)),
            b=float(raw.get("b", 0)),
            a=float(raw.get("a", 1)),
        )

    @staticmethod
    def format_color(color: Color, alpha: float = 1) -> str:
        """
        CSS literal for a normalized color.
        Opaque white/black -> named color, opaque -> '#RRGGBB', translucent -> 'rgba(r, g, b, a)'.
        """
        if alpha == 1:
            named = config.NAMED_COLORS.get((color.r, color.g, color.b))
            if named:
                return named

            r = int(round(color.r * 255))
            g = int(round(color.g * 255))
            b = int(round(color.b * 255))
            return f"#{r:02x}{g:02x}{b:02x}".upper()

        r_text = NumberUtils.to_auto_fixed(color.r * 255)
        g_text = NumberUtils.to_auto_fixed(color.g * 255)
        b_text = NumberUtils.to_auto_fixed(color.b * 255)
        a_text = NumberUtils.to_auto_fixed(alpha)
        return f"rgba({r_text}, {g_text}, {b_text}, {a_text})"
