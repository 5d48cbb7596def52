"""Shared test fixtures for the onion diagram tests."""
import pytest
from shared.svg import new_canvas, render_svg
from onion.constants import WIDTH, HEIGHT, STYLE_IMPORT
from onion.gen_onion import build_onion_diagram


@pytest.fixture
def canvas():
    """Empty 410x410 canvas."""
    return new_canvas(WIDTH, HEIGHT)


@pytest.fixture(scope="session")
def diagram():
    """Fully assembled diagram canvas."""
    return build_onion_diagram()


@pytest.fixture(scope="session")
def svg_text(diagram):
    """Serialized diagram with the stylesheet import."""
    return render_svg(diagram, STYLE_IMPORT)
