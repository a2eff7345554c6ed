import configuration as config
from log_utils import logs, setup_logger

from .gradient_line import GradientLineResolver
from .models import ColorStop, GradientHandles, GradientLine, Point, ResolvedStop, Shape
from .utils.color import ColorUtils
from .utils.geometry import GeometryUtils
from .utils.number import NumberUtils

logger = setup_logger(__name__)


@logs(logger, on=False)
class StopProjector:
    """Places color stops, given along the raw handle segment, onto the resolved gradient line."""

    def __init__(self, gradient_config: config.GradientConfig = config.GRADIENT_CONFIG) -> None:
        self.config = gradient_config

    def reference_point(self, handles: GradientHandles, line: GradientLine) -> Point:
        """
        End of the gradient line that maps to 0%.
        Handles going down the box start from the upper end, all others from the lower one.
        """
        start_y = NumberUtils.round_to(handles.start.y, self.config.DECIMAL_PLACES)
        end_y = NumberUtils.round_to(handles.end.y, self.config.DECIMAL_PLACES)
        if start_y < end_y:
            return line.top if line.top.y < line.bottom.y else line.bottom
        return line.top if line.top.y > line.bottom.y else line.bottom

    @staticmethod
    def absolute_start(shape: Shape, handles: GradientHandles) -> Point:
        return shape.top_left.offset(handles.start.x * shape.width, handles.start.y * shape.height)

    @logs(logger, on=True)
    def project(
        self,
        shape: Shape,
        handles: GradientHandles,
        stops: list[ColorStop],
        line: GradientLine,
        fill_opacity: float = 1.0,
    ) -> list[ResolvedStop]:
        """Color and raw percentage for every stop, in input order. 'line' is in the unrotated box."""
        delta = GradientLineResolver.handle_vector(shape, handles)
        reference = self.reference_point(handles, line)
        start = self.absolute_start(shape, handles)
        line_length = line.length or 1

        resolved: list[ResolvedStop] = []
        for stop in stops:
            color = ColorUtils.format_color(stop.color, stop.alpha * fill_opacity)
            # the handle vector has y pointing up, screen y points down
            color_point = Point(start.x + stop.position * delta.x, start.y - stop.position * delta.y)
            percentage = GeometryUtils.distance(color_point, reference) / line_length

            logger.debug(f"Stop {stop.position} ({color}) at {color_point} -> {percentage:.4f}")
            resolved.append(ResolvedStop(color=color, percentage=percentage))

        return resolved

    @staticmethod
    def normalize_direction(stops: list[ResolvedStop]) -> list[ResolvedStop]:
        """Flip every percentage when the projection runs against the declared stop order."""
        if len(stops) < 2 or stops[0].percentage <= stops[1].percentage:
            return list(stops)

        logger.info("Projected stops run backwards, flipping percentages")
        return [ResolvedStop(color=stop.color, percentage=1 - stop.percentage) for stop in stops]
