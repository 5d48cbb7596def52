"""Named constants for the onion-layers diagram.

All lengths in SVG user units.
"""
from shared.types import Layer
from onion.palette import shade

# Canvas
WIDTH = 410
HEIGHT = 410
STYLE_IMPORT = "@import 'styles.css';"

# Rings
SPACING = 50                        # radius step between adjacent rings
RING_STROKE = shade("grey", 500)
RING_STROKE_WIDTH = 2
LAYER_SHADE = 100

# Text
FONT_FAMILY = "sans-serif"
FONT_SIZE = 15
TEXT_COLOR = shade("grey", 900)
COMPONENT_TEXT_COLOR = shade("grey", 500)
LETTER_SPACING = 1
RADIUS_FIX = FONT_SIZE / 3          # shifts the label baseline so cap height sits on the band center

# Connectors
ARROW_COLOR = shade("green", 900)
ARROW_WIDTH = 2
ARROW_TEXT_COLOR = shade("grey", 700)
ARROW_TEXT_DY = -10
ARROW_HEAD_ID = "arrow-head"
ARROW_HEAD_SIZE = 8
ARROW_PATTERN_ID = "arrow-pattern"
CLIP_MARGIN = 100

# Layers, in paint order: outermost first so the base ring ends up on top.
INFRASTRUCTURE = Layer(4, "infrastructure", shade("yellow", LAYER_SHADE),
                       ("GUI", "API", "Persistence", "Server"))
MANAGEMENT = Layer(3, "management", shade("lightGreen", LAYER_SHADE))
PROCESSING = Layer(2, "processing", shade("lightBlue", LAYER_SHADE))
BASE = Layer(1, "base", shade("blueGrey", LAYER_SHADE))
LAYERS = (INFRASTRUCTURE, MANAGEMENT, PROCESSING, BASE)

# Output, relative to the repository root
OUTPUT_PATH = ("doc", "images", "onion-layers.svg")
