"""Shared types, geometry, and SVG utilities."""

from .types import Point, PathCommand, Layer, RingHandle, ConnectorHandle, Canvas
from .geometry import (
    half_circle_arc, ring_radius, segment_offsets,
    extend_horizontal, clip_polygon,
)
from .svg import (
    new_canvas, path_d, line_d, points_attr, font_attrs, class_attr,
    text_on_path, render_svg,
)
