"""Pure geometry functions: half-circle arcs, ring radii, label offsets, clip regions."""
import numpy as np
from .types import Point, PathCommand

# ============================================================
# Arcs
# ============================================================
def half_circle_arc(radius: float, center: Point, sweep: int) -> list[PathCommand]:
    """Half-circle text baseline from 9 o'clock to 3 o'clock.

    sweep=1 runs over the top, sweep=0 under the bottom. Large-arc flag and
    x-axis rotation are always 0. Degenerate input (r <= 0) is not rejected;
    it passes through to the path unchanged.
    """
    cx, cy = center
    return [
        ("M", cx - radius, cy),
        ("A", radius, radius, 0, 0, sweep, cx + radius, cy),
    ]

def ring_radius(index: int, spacing: float) -> float:
    """Radius of the ring for a 1-based layer index."""
    return index * spacing

def segment_offsets(n: int) -> list[float]:
    """startOffset percentages centering n labels in n equal arc segments."""
    if n == 0:
        return []
    seg = 100.0 / n
    return (np.arange(n) * seg + seg / 2).tolist()

# ============================================================
# Connector Geometry
# ============================================================
def extend_horizontal(p1: Point, p2: Point, margin: float) -> tuple[Point, Point]:
    """Push p1 left and p2 right by margin.

    Only x moves, so the result lies on the original line only when it is
    horizontal.
    """
    return (p1[0] - margin, p1[1]), (p2[0] + margin, p2[1])

def clip_polygon(p1: Point, p2: Point, width: float) -> list[Point]:
    """Quad spanning p1..p2, offset by width above and below each endpoint."""
    a = np.array([p1, p2], dtype=float)
    up = a - (0.0, width)
    down = a + (0.0, width)
    quad = [up[0], up[1], down[1], down[0]]
    return [(float(x), float(y)) for x, y in quad]
