"""Concentric ring layers with labels curved along half-circle arcs."""
from shared.types import Canvas, Layer, RingHandle
from shared.geometry import half_circle_arc, ring_radius, segment_offsets
from shared.svg import path_d, font_attrs, text_on_path
from onion.constants import (
    SPACING, RING_STROKE, RING_STROKE_WIDTH,
    FONT_FAMILY, FONT_SIZE, TEXT_COLOR, COMPONENT_TEXT_COLOR,
    LETTER_SPACING, RADIUS_FIX,
)


def label_attrs(fill: str) -> str:
    return (f'text-anchor="middle" letter-spacing="{LETTER_SPACING}" '
            + font_attrs(FONT_FAMILY, FONT_SIZE, fill))


def build_ring(canvas: Canvas, layer: Layer, spacing: float = SPACING) -> RingHandle:
    """Paint one ring centered on the canvas and return its circle.

    The layer label runs over the top of the band (upper half-circle); the
    component labels run along the bottom, one per equal arc segment.
    """
    r = ring_radius(layer.index, spacing)
    cx, cy = canvas.cx, canvas.cy
    out = canvas.body

    out.append(f'<g id="layer-{layer.index}">')
    out.append(f'<circle cx="{cx:.1f}" cy="{cy:.1f}" r="{r:.1f}" fill="{layer.color}"'
               f' fill-opacity="1" stroke="{RING_STROKE}" stroke-width="{RING_STROKE_WIDTH}"/>')

    path_r = r - spacing / 2
    upper_id = f"layer-{layer.index}-upper"
    upper = half_circle_arc(path_r - RADIUS_FIX, (cx, cy), 1)
    canvas.defs.append(f'<path id="{upper_id}" d="{path_d(upper)}"/>')
    text_on_path(out, upper_id, layer.label, "50%", label_attrs(TEXT_COLOR))

    if layer.components:
        lower_id = f"layer-{layer.index}-lower"
        lower = half_circle_arc(path_r + RADIUS_FIX, (cx, cy), 0)
        canvas.defs.append(f'<path id="{lower_id}" d="{path_d(lower)}"/>')
        for name, offset in zip(layer.components, segment_offsets(len(layer.components))):
            text_on_path(out, lower_id, name, f"{offset:g}%",
                         label_attrs(COMPONENT_TEXT_COLOR))

    out.append('</g>')
    return RingHandle(cx, cy, r)
