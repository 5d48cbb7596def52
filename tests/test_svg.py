"""Tests for shared/svg.py formatting and serialization."""
from shared.svg import (
    new_canvas, path_d, line_d, points_attr, font_attrs, class_attr,
    text_on_path, render_svg,
)
from shared.geometry import half_circle_arc


def test_path_d_arc():
    d = path_d(half_circle_arc(170.0, (205.0, 205.0), 1))
    assert d == "M 35.0 205.0 A 170.0 170.0 0 0 1 375.0 205.0"


def test_line_d():
    assert line_d((0.0, 1.0), (2.5, 1.0)) == "M 0.0 1.0 L 2.5 1.0"


def test_points_attr():
    assert points_attr([(0, 0), (1.5, 2)]) == "0.0,0.0 1.5,2.0"


def test_font_attrs():
    assert font_attrs("sans-serif", 15, "#212121") == \
        'font-family="sans-serif" font-size="15" fill="#212121"'


def test_class_attr():
    assert class_attr(None) == ""
    assert class_attr("go-right") == ' class="go-right"'


class TestTextOnPath:
    def test_plain_text_escaped(self):
        out = []
        text_on_path(out, "p1", "a < b", "50%", 'fill="red"')
        assert out == ['<text fill="red"><textPath href="#p1" startOffset="50%">'
                       'a &lt; b</textPath></text>']

    def test_markup_passthrough(self):
        out = []
        text_on_path(out, "p1", ['<tspan dy="-10">x</tspan>'], "50%", 'fill="red"')
        assert '<tspan dy="-10">x</tspan></textPath>' in out[0]


class TestRenderSvg:
    def test_root_size(self):
        svg = render_svg(new_canvas(410, 410))
        assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert 'width="410" height="410"' in svg
        assert 'viewBox="0 0 410 410"' in svg
        assert svg.rstrip().endswith("</svg>")

    def test_style_embedded_verbatim(self):
        svg = render_svg(new_canvas(10, 10), "@import 'styles.css';")
        assert "<style>@import 'styles.css';</style>" in svg

    def test_no_defs_when_empty(self):
        assert "<defs>" not in render_svg(new_canvas(10, 10))

    def test_defs_before_body(self):
        c = new_canvas(10, 10)
        c.defs.append('<path id="a" d="M 0 0"/>')
        c.body.append('<circle r="1"/>')
        svg = render_svg(c)
        assert svg.index("<defs>") < svg.index('<path id="a"') < svg.index("</defs>")
        assert svg.index("</defs>") < svg.index("<circle")


def test_path_d_rounds_to_tenths():
    d = path_d(half_circle_arc(16 / 3, (0.0, 0.0), 1))
    assert d == "M -5.3 0.0 A 5.3 5.3 0 0 1 5.3 0.0"
