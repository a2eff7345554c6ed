import configuration as config
from log_utils import logs, setup_logger

from .gradient_line import GradientLineResolver
from .models import ColorStop, GradientHandles, LinearGradient, ResolvedStop, Shape
from .stop_projector import StopProjector
from .utils.angle import AngleUtils
from .utils.number import NumberUtils

logger = setup_logger(__name__)


@logs(logger, on=True)
class LinearGradientConverter:
    """Figma linear gradient fill -> CSS linear-gradient()."""

    def __init__(
        self,
        gradient_config: config.GradientConfig = config.GRADIENT_CONFIG,
        resolver: GradientLineResolver | None = None,
        projector: StopProjector | None = None,
    ) -> None:
        self.config = gradient_config
        self.resolver = resolver or GradientLineResolver(gradient_config)
        self.projector = projector or StopProjector(gradient_config)

    def rotation_for(self, shape: Shape, ignore_intrinsic_rotation: bool | None = None) -> float:
        if ignore_intrinsic_rotation is None:
            ignore_intrinsic_rotation = self.config.IGNORE_INTRINSIC_ROTATION
        return 0 if ignore_intrinsic_rotation else shape.rotation

    @logs(logger, on=True)
    def convert(
        self,
        shape: Shape,
        handles: GradientHandles,
        stops: list[ColorStop],
        fill_opacity: float = 1.0,
        ignore_intrinsic_rotation: bool | None = None,
    ) -> LinearGradient:
        """Angle, stop percentages and the gradient line on the node. Raises DegenerateLinesError when the geometry collapses."""
        rotation = self.rotation_for(shape, ignore_intrinsic_rotation)
        angle = AngleUtils.calculate_angle(shape, handles)
        logger.info(f"Gradient angle: {angle:.2f}deg, shape {shape.width}x{shape.height}, rotation {rotation}")

        line = self.resolver.resolve(shape, handles, angle)
        projected = self.projector.project(shape, handles, stops, line, fill_opacity)
        return LinearGradient(
            angle=angle,
            stops=self.projector.normalize_direction(projected),
            line=self.resolver.place(shape, line, rotation),
        )

    def format_stop(self, stop: ResolvedStop) -> str:
        return f"{stop.color} {NumberUtils.to_fixed(stop.percentage * 100, self.config.DECIMAL_PLACES)}%"

    def format_css(self, gradient: LinearGradient) -> str:
        parts = [f"{NumberUtils.to_fixed(gradient.angle, self.config.DECIMAL_PLACES)}deg"]
        parts.extend(self.format_stop(stop) for stop in gradient.stops)
        return f"linear-gradient({', '.join(parts)})"

    def to_css(
        self,
        shape: Shape,
        handles: GradientHandles,
        stops: list[ColorStop],
        fill_opacity: float = 1.0,
        ignore_intrinsic_rotation: bool | None = None,
    ) -> str:
        css = self.format_css(self.convert(shape, handles, stops, fill_opacity, ignore_intrinsic_rotation))
        logger.info(css)
        return css


def compute_css_linear_gradient(
    shape: Shape,
    handles: GradientHandles,
    stops: list[ColorStop],
    fill_opacity: float = 1.0,
    *,
    ignore_intrinsic_rotation: bool | None = None,
) -> str:
    """
    CSS 'linear-gradient(<angle>deg, <color> <pct>%, ...)' for one shape and one linear fill.
    'ignore_intrinsic_rotation' falls back to GRADIENT_CONFIG.IGNORE_INTRINSIC_ROTATION.
    Depends only on its arguments and GRADIENT_CONFIG.
    """
    return LinearGradientConverter().to_css(shape, handles, stops, fill_opacity, ignore_intrinsic_rotation)
