from typing import Any

import requests

import configuration as config
from log_utils import logs, setup_logger

from .base import FigmaSession
from .converter import LinearGradientConverter
from .errors import InvalidGradientError
from .models import ColorStop, GradientHandles, GradientInput, Point, Shape
from .utils.color import ColorUtils
from .utils.transform import TransformUtils

logger = setup_logger(__name__)


@logs(logger, on=True)
class FigmaGradientExtractor:
    """
    Reads the first fill of a Figma node (REST API response or a plugin node dump)
    and feeds it to the gradient converter.
    """

    def __init__(self, session: FigmaSession | None = None, converter: LinearGradientConverter | None = None):
        self.session = session or FigmaSession.from_settings()
        self.converter = converter or LinearGradientConverter()

    @logs(logger, on=True)
    def fetch_node(self, node_id: str) -> dict[str, Any]:
        """Returns the 'document' of a single node from the Figma file nodes endpoint."""
        logger.info(f"Fetching node {node_id} from file {self.session.file_id}")
        response = requests.get(
            self.session.nodes_url,
            params={"ids": node_id},
            headers=self.session.headers,
            timeout=config.FIGMA_CONFIG.REQUEST_TIMEOUT,
        )
        response.raise_for_status()

        nodes = response.json().get(config.FigmaKey.NODES) or {}
        entry = nodes.get(node_id)
        if not isinstance(entry, dict) or not isinstance(entry.get(config.FigmaKey.DOCUMENT), dict):
            raise InvalidGradientError(f"Node {node_id} not found in file {self.session.file_id}")
        return entry[config.FigmaKey.DOCUMENT]

    # =========== Node parsing ==============
    @staticmethod
    def extract_shape(node: dict[str, Any]) -> Shape:
        box = node.get(config.FigmaKey.ABSOLUTE_BOUNDING_BOX)
        box = box if isinstance(box, dict) else {}

        size = node.get(config.FigmaKey.SIZE)
        if isinstance(node.get("width"), (int, float)) and isinstance(node.get("height"), (int, float)):
            width, height = node["width"], node["height"]
        elif isinstance(size, dict):
            width, height = size.get("x", 0), size.get("y", 0)
        else:
            width, height = box.get("width", 0), box.get("height", 0)

        transform = node.get(config.FigmaKey.RELATIVE_TRANSFORM)
        if isinstance(transform, list) and len(transform) >= 2:
            top_left = Point(float(transform[0][2]), float(transform[1][2]))
        else:
            top_left = Point(float(box.get("x", 0)), float(box.get("y", 0)))

        rotation = node.get(config.FigmaKey.ROTATION, 0)
        if not isinstance(rotation, (int, float)):
            rotation = 0

        return Shape(width=float(width), height=float(height), top_left=top_left, rotation=float(rotation))

    @staticmethod
    def extract_fill(node: dict[str, Any]) -> dict[str, Any]:
        """First fill of the node, which must be a visible linear gradient."""
        fills = node.get(config.FigmaKey.FILLS)
        if not isinstance(fills, list) or not fills:
            raise InvalidGradientError(f"Node {node.get('id', '?')} has no fills")

        fill = fills[0]
        if not isinstance(fill, dict):
            raise InvalidGradientError(f"Node {node.get('id', '?')} has a malformed fill: {fill!r}")

        fill_type = fill.get(config.FigmaKey.TYPE)
        if fill_type != config.FigmaPaintType.GRADIENT_LINEAR:
            raise InvalidGradientError(f"First fill of node {node.get('id', '?')} is {fill_type}, not a linear gradient")
        if fill.get(config.FigmaKey.VISIBLE, True) is False:
            raise InvalidGradientError(f"Linear gradient fill of node {node.get('id', '?')} is hidden")
        return fill

    @staticmethod
    def extract_handles(fill: dict[str, Any]) -> GradientHandles:
        positions = fill.get(config.FigmaKey.GRADIENT_HANDLE_POSITIONS)
        if isinstance(positions, list) and len(positions) >= 2:
            return GradientHandles.from_positions(positions)

        transform = fill.get(config.FigmaKey.GRADIENT_TRANSFORM)
        if isinstance(transform, list):
            return TransformUtils.handles_from_transform(transform)

        raise InvalidGradientError("Linear gradient fill has neither handle positions nor a gradient transform")

    @staticmethod
    def extract_stops(fill: dict[str, Any]) -> list[ColorStop]:
        stops: list[ColorStop] = []
        for raw_stop in fill.get(config.FigmaKey.GRADIENT_STOPS) or []:
            if not isinstance(raw_stop, dict):
                continue
            color = ColorUtils.parse_color(raw_stop.get("color") or {})
            stops.append(ColorStop(position=float(raw_stop.get("position", 0)), color=color, alpha=color.a))
        return stops

    def extract_input(self, node: dict[str, Any]) -> GradientInput:
        fill = self.extract_fill(node)

        opacity = fill.get(config.FigmaKey.OPACITY)
        fill_opacity = float(opacity) if isinstance(opacity, (int, float)) else 1.0

        gradient_input = GradientInput(
            shape=self.extract_shape(node),
            handles=self.extract_handles(fill),
            stops=self.extract_stops(fill),
            fill_opacity=fill_opacity,
            node_id=node.get("id"),
        )
        logger.debug(f"Extracted gradient input: {gradient_input}")
        return gradient_input

    # =========== Conversion ==============
    def convert(self, node: dict[str, Any], ignore_intrinsic_rotation: bool | None = None) -> str:
        gradient_input = self.extract_input(node)
        return self.converter.to_css(
            gradient_input.shape,
            gradient_input.handles,
            gradient_input.stops,
            gradient_input.fill_opacity,
            ignore_intrinsic_rotation,
        )

    def convert_node(self, node_id: str, ignore_intrinsic_rotation: bool | None = None) -> str:
        return self.convert(self.fetch_node(node_id), ignore_intrinsic_rotation)
