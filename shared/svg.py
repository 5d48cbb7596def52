"""SVG canvas, path-command formatting, and document serialization."""
from xml.sax.saxutils import escape
from .types import Canvas, PathCommand, Point

SVG_NS = "http://www.w3.org/2000/svg"


def new_canvas(width: float, height: float) -> Canvas:
    return Canvas(width, height, [], [])


def _num(v) -> str:
    # Flags and other integers stay bare; coordinates get one decimal.
    if isinstance(v, int):
        return str(v)
    return f"{v:.1f}"


def path_d(commands: list[PathCommand]) -> str:
    """Format path commands, e.g. [("M", 0.0, 5.0), ("L", 9.0, 5.0)] -> 'M 0.0 5.0 L 9.0 5.0'.

    Float coordinates are rounded to 0.1 user units; integer flags print bare.
    """
    return " ".join(" ".join([c[0]] + [_num(v) for v in c[1:]]) for c in commands)


def line_d(p1: Point, p2: Point) -> str:
    """Straight line as a path (text-on-path needs a <path>, not a <line>)."""
    return path_d([("M", p1[0], p1[1]), ("L", p2[0], p2[1])])


def points_attr(points: list[Point]) -> str:
    return " ".join(f"{x:.1f},{y:.1f}" for x, y in points)


def font_attrs(family: str, size: float, fill: str) -> str:
    return f'font-family="{family}" font-size="{size}" fill="{fill}"'


def class_attr(name: str | None) -> str:
    return f' class="{name}"' if name else ""


def text_on_path(out: list, href: str, content, start_offset: str, attrs: str):
    """Append a <text><textPath> element following the path with id *href*.

    *content* is either a plain string or pre-built inner markup (a list of
    already-escaped strings such as a <tspan>).
    """
    inner = escape(content) if isinstance(content, str) else "".join(content)
    out.append(f'<text {attrs}><textPath href="#{href}" startOffset="{start_offset}">'
               f'{inner}</textPath></text>')


def render_svg(canvas: Canvas, style: str | None = None) -> str:
    """Serialize a canvas; *style* is embedded verbatim in a <style> element."""
    w, h = canvas.width, canvas.height
    out = [f'<svg xmlns="{SVG_NS}" version="1.1" width="{w}" height="{h}"'
           f' viewBox="0 0 {w} {h}">']
    if style is not None:
        out.append(f'<style>{style}</style>')
    if canvas.defs:
        out.append('<defs>')
        out.extend(canvas.defs)
        out.append('</defs>')
    out.extend(canvas.body)
    out.append('</svg>')
    return "\n".join(out) + "\n"
