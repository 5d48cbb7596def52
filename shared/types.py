"""Shared type definitions for the onion diagram generator."""
from typing import NamedTuple

Point = tuple[float, float]

# Path command tuple: ("M", x, y) or ("A", rx, ry, rot, large, sweep, x, y)
PathCommand = tuple

class Layer(NamedTuple):
    index: int; label: str; color: str
    components: tuple[str, ...] = ()

class RingHandle(NamedTuple):
    """Circle drawn for one layer; used to place connectors."""
    cx: float; cy: float; r: float

    @property
    def x(self) -> float:
        """Left edge of the circle's bounding box."""
        return self.cx - self.r

class ConnectorHandle(NamedTuple):
    d: str
    clip: list[Point] | None
    marker: str | None

class Canvas(NamedTuple):
    """Fixed-size drawing surface: defs and painted body, in emit order."""
    width: float; height: float
    defs: list[str]
    body: list[str]

    @property
    def cx(self) -> float:
        return self.width / 2

    @property
    def cy(self) -> float:
        return self.height / 2
