"""Fixed keyword sets shared by the parser, rule table and extractor."""

from __future__ import annotations

# Pseudo-class modifiers recognised in class tokens.
PSEUDO_PREFIXES = frozenset({
    "hover",
    "focus",
    "active",
    "visited",
    "disabled",
    "enabled",
    "empty",
    "checked",
})

POSITION_VALUES = ("static", "relative", "absolute", "fixed", "sticky")

DISPLAY_VALUES = (
    "block",
    "inline",
    "inline-block",
    "flex",
    "grid",
    "hidden",
    "inline-flex",
    "inline-grid",
)

# Class names that are complete utilities on their own (``block``, ``absolute``).
DIRECT_KEYWORDS = frozenset(POSITION_VALUES + DISPLAY_VALUES)

# Spacing direction suffix -> physical sides, in emission order.
SPACING_DIRECTIONS: dict[str, tuple[str, ...]] = {
    "": ("",),
    "x": ("left", "right"),
    "y": ("top", "bottom"),
    "t": ("top",),
    "b": ("bottom",),
    "l": ("left",),
    "r": ("right",),
}

# CSS property -> class key prefix.
SPACING_PROPERTIES: dict[str, str] = {
    "padding": "p",
    "margin": "m",
}

SIZE_PROPERTIES: dict[str, str] = {
    "w": "width",
    "h": "height",
    "max-w": "max-width",
    "min-w": "min-width",
    "max-h": "max-height",
    "min-h": "min-height",
}

INSET_PROPERTIES: dict[str, str] = {
    "top": "top",
    "left": "left",
    "right": "right",
    "bottom": "bottom",
}
