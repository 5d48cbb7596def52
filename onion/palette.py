"""Material Design colour shades used by the diagram.

Subset of the Material palette, keyed by hue name then shade depth.
"""

MATERIAL = {
    "grey":       {100: "#f5f5f5", 500: "#9e9e9e", 700: "#616161", 900: "#212121"},
    "green":      {100: "#c8e6c9", 500: "#4caf50", 700: "#388e3c", 900: "#1b5e20"},
    "yellow":     {100: "#fff9c4", 500: "#ffeb3b", 700: "#fbc02d", 900: "#f57f17"},
    "lightGreen": {100: "#dcedc8", 500: "#8bc34a", 700: "#689f38", 900: "#33691e"},
    "lightBlue":  {100: "#b3e5fc", 500: "#03a9f4", 700: "#0288d1", 900: "#01579b"},
    "blueGrey":   {100: "#cfd8dc", 500: "#607d8b", 700: "#455a64", 900: "#263238"},
}


def shade(hue: str, depth: int) -> str:
    """Hex colour for *hue* at *depth*. KeyError for unknown hue or depth."""
    return MATERIAL[hue][depth]
