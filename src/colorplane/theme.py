"""Pure data: named colors, projection defaults, and layout constants.

No library imports — this module defines the defaults as plain Python
values so the projections, the scale, and the matplotlib style can share them.
"""

# Endpoints used by the built-in projections
COLORS = {
    "white": "#FFFFFF",
    "black": "#000000",
    "red": "#FF0000",
    "blue": "#0000FF",
    "na": "#7F7F7F",       # grey50, drawn for missing or out-of-limits rows
}

# Chroma ranges of BT.601 YUV, and the constant luma the default plane sits at
YUV = {
    "Y": 0.35,
    "u_max": 0.436,
    "v_max": 0.615,
}

# Neutral chart identity; the color plane carries the data colors
STYLE_COLORS = {
    "bg": "#FFFFFF",
    "text": "#2B2B2B",
    "muted": "#6B6860",
    "border": "#C4C4C4",
}

FONTS = {
    "sans": [
        "Helvetica Neue", "Helvetica", "Arial",
        "Segoe UI", "Roboto", "sans-serif",
    ],
}

# Chart layout constants
LAYOUT = {
    "figsize": (7.0, 5.0),
    "dpi": 80,
    "title_size": 14,
    "label_size": 11,
    "tick_size": 9,
    "spine_width": 0.8,
    "marker_size": 36,
    "legend_size": 0.28,    # inset guide, as a fraction of the axes
    "legend_resolution": 32,
}
