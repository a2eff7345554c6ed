from decimal import ROUND_HALF_UP, Decimal


class NumberUtils:
    """Single place for rounding and number formatting, so geometry and CSS output agree."""

    @staticmethod
    def round_to(value: float, decimal_places: int = 2) -> float:
        """Round half away from zero on the exact binary value: 0.125 -> 0.13, 2.675 -> 2.67."""
        return float(Decimal(value).quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_UP))

    @staticmethod
    def to_fixed(value: float, decimal_places: int = 2) -> str:
        """Fixed-point string, e.g. 90 -> '90.00'. Negative zero is printed as zero."""
        rounded = NumberUtils.round_to(value, decimal_places)
        if rounded == 0:
            rounded = 0.0
        return f"{rounded:.{decimal_places}f}"

    @staticmethod
    def to_auto_fixed(value: float, decimal_places: int = 2) -> str:
        """Up to 'decimal_places' digits without trailing zeros: 128.00 -> '128', 128.50 -> '128.5'."""
        text = NumberUtils.to_fixed(value, decimal_places)
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
