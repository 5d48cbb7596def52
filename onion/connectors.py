"""Labelled connector arrows between rings, with optional marker and clipping."""
from typing import NamedTuple
from xml.sax.saxutils import escape

from shared.types import Canvas, ConnectorHandle
from shared.geometry import extend_horizontal, clip_polygon
from shared.svg import line_d, points_attr, font_attrs, class_attr, text_on_path
from onion.constants import (
    FONT_FAMILY, FONT_SIZE,
    ARROW_COLOR, ARROW_WIDTH, ARROW_TEXT_COLOR, ARROW_TEXT_DY,
    ARROW_HEAD_ID, ARROW_HEAD_SIZE, ARROW_PATTERN_ID, CLIP_MARGIN,
)


class ConnectorOptions(NamedTuple):
    """Connector styling.

    pattern_or_color: stroke paint, a colour or a ``url(#pattern)`` reference.
    width:            stroke width; also the clip half-height.
    head:             marker id attached at the path end when draw_head is set;
                      defined on the canvas on first use if missing.
    text:             label drawn along the connector, floated above it.
    text_color:       label fill.
    draw_head:        attach the head marker.
    path_class:       CSS class on the path (e.g. an animation hook).
    text_class:       CSS class on the label.
    use_clipping:     extend the line by CLIP_MARGIN past both ends and clip
                      the group back to the original span.
    """
    pattern_or_color: str = ARROW_COLOR
    width: float = ARROW_WIDTH
    head: str = ARROW_HEAD_ID
    text: str | None = None
    text_color: str = ARROW_TEXT_COLOR
    draw_head: bool = True
    path_class: str | None = None
    text_class: str | None = None
    use_clipping: bool = False


def arrow_head(canvas: Canvas, marker_id: str = ARROW_HEAD_ID, color: str = ARROW_COLOR) -> str:
    """Define the triangular head marker (10x7 drawn, shown at 8x8). Returns its id."""
    s = ARROW_HEAD_SIZE
    canvas.defs.append(f'<marker id="{marker_id}" markerWidth="{s}" markerHeight="{s}"'
                       f' refX="5" refY="3.5" viewBox="0 0 10 7" orient="auto">')
    canvas.defs.append(f'<polygon points="0,0 10,3.5 0,7" fill="{color}"/>')
    canvas.defs.append('</marker>')
    return marker_id


def arrow_pattern(canvas: Canvas, pattern_id: str = ARROW_PATTERN_ID, color: str = ARROW_COLOR) -> str:
    """Define the repeating tick-and-triangle stroke pattern. Returns a paint reference."""
    canvas.defs.append(f'<pattern id="{pattern_id}" x="0" y="0" width="30" height="20"'
                       f' patternUnits="userSpaceOnUse">')
    canvas.defs.append('<g>')
    canvas.defs.append(f'<line x1="0" y1="3.5" x2="10" y2="3.5" stroke="{color}" stroke-width="1"/>')
    canvas.defs.append(f'<polygon points="10,0 20,3.5 10,7" fill="{color}"/>')
    canvas.defs.append('</g>')
    canvas.defs.append('</pattern>')
    return f"url(#{pattern_id})"


def build_connector(canvas: Canvas, x1: float, y1: float, x2: float, y2: float,
                    options: ConnectorOptions = ConnectorOptions()) -> ConnectorHandle:
    """Draw a connector from (x1, y1) to (x2, y2).

    With use_clipping the stroke is lengthened horizontally and clipped back
    to a band of +/- width around the original endpoints, so an animated
    stroke (e.g. a dash-offset sweep) stays inside the original span. The
    extension moves x only; sloped connectors render but extend off-line.
    """
    o = options
    cid = f"connector-{len(canvas.body)}"
    p1, p2 = (x1, y1), (x2, y2)
    if o.use_clipping:
        p1, p2 = extend_horizontal(p1, p2, CLIP_MARGIN)
    d = line_d(p1, p2)

    clip = None
    group_attrs = f' id="{cid}"'
    if o.use_clipping:
        clip = clip_polygon((x1, y1), (x2, y2), o.width)
        canvas.defs.append(f'<clipPath id="{cid}-clip">')
        canvas.defs.append(f'<polygon points="{points_attr(clip)}"/>')
        canvas.defs.append('</clipPath>')
        group_attrs += f' clip-path="url(#{cid}-clip)"'

    marker = o.head if o.draw_head else None
    if marker and f'<marker id="{marker}"' not in "\n".join(canvas.defs):
        arrow_head(canvas, marker)
    marker_attr = f' marker-end="url(#{marker})"' if marker else ""
    out = canvas.body
    out.append(f'<g{group_attrs}>')
    out.append(f'<path d="{d}"{class_attr(o.path_class)} fill="none"'
               f' stroke="{o.pattern_or_color}" stroke-width="{o.width}"{marker_attr}/>')
    out.append('</g>')

    # Label follows its own copy of the path, outside the clipped group.
    if o.text:
        text_id = f"{cid}-text"
        canvas.defs.append(f'<path id="{text_id}" d="{d}"/>')
        attrs = ('text-anchor="middle"' + class_attr(o.text_class) + " "
                 + font_attrs(FONT_FAMILY, FONT_SIZE, o.text_color))
        tspan = f'<tspan dy="{ARROW_TEXT_DY}">{escape(o.text)}</tspan>'
        text_on_path(out, text_id, [tspan], "50%", attrs)

    return ConnectorHandle(d, clip, marker)
