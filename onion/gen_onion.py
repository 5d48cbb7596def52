"""Generate the onion-layers architecture diagram SVG.

Four concentric rings (infrastructure, management, processing, base) and
one clipped, labelled connector from the outer ring's left edge to the
center. Output is deterministic: no timestamps or version stamps.
"""
import os

from shared.types import Canvas
from shared.svg import new_canvas, render_svg
from onion.constants import WIDTH, HEIGHT, STYLE_IMPORT, LAYERS, OUTPUT_PATH
from onion.rings import build_ring
from onion.connectors import ConnectorOptions, arrow_head, arrow_pattern, build_connector

_ROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), os.pardir)


def build_onion_diagram() -> Canvas:
    """Paint all rings and the connector onto a fresh canvas."""
    canvas = new_canvas(WIDTH, HEIGHT)
    arrow_head(canvas)
    pattern = arrow_pattern(canvas)

    # Later rings paint on top: LAYERS runs outermost to innermost.
    rings = {layer.index: build_ring(canvas, layer) for layer in LAYERS}
    outer, base = rings[max(rings)], rings[1]

    build_connector(canvas, outer.x, outer.cy, base.cx, base.cy, ConnectorOptions(
        text="may use code in",
        pattern_or_color=pattern,
        width=10,
        draw_head=False,
        path_class="go-right",
        text_class="arrow-label",
        use_clipping=True,
    ))
    return canvas


def render_onion_svg(style: str = STYLE_IMPORT) -> str:
    return render_svg(build_onion_diagram(), style)


def main():
    svg_path = os.path.normpath(os.path.join(_ROOT, *OUTPUT_PATH))
    os.makedirs(os.path.dirname(svg_path), exist_ok=True)
    with open(svg_path, "w") as f:
        f.write(render_onion_svg())
    print(f"Onion layers diagram written to {svg_path}")
    print(f"  {len(LAYERS)} rings, 1 connector")


if __name__ == "__main__":
    main()
