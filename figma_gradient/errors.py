class DegenerateLinesError(ValueError):
    """Two lines are parallel or coincident, so there is no single intersection point."""


class InvalidGradientError(ValueError):
    """A Figma node does not carry a linear gradient fill that can be converted."""
