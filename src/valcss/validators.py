"""Value validators: one total predicate per CSS value domain.

Every predicate takes the raw bracket value as a string and returns a bool.
None of them raise.
"""

from __future__ import annotations

import re
from typing import Callable

Validator = Callable[[str], bool]


# ---------------------------------------------------------------------------
# Patterns (all matched against the whole value)
# ---------------------------------------------------------------------------

PATTERNS: dict[str, re.Pattern[str]] = {
    "length": re.compile(r"-?\d+(\.\d+)?(px|em|rem|%|vh|vw)?"),
    "calc": re.compile(r"calc\(.+\)"),
    "clamp": re.compile(r"clamp\(.+\)"),
    "min": re.compile(r"min\(.+\)"),
    "max": re.compile(r"max\(.+\)"),
    "hex": re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})"),
    "rgb": re.compile(r"rgb\((\s*\d{1,3}\s*,){2}\s*\d{1,3}\s*\)"),
    "rgba": re.compile(r"rgba\((\s*\d{1,3}\s*,){3}\s*(0|1|0?\.\d+)\)"),
    "hsl": re.compile(r"hsla?\(\s*\d{1,3}\s*(,\s*\d{1,3}%\s*){2}(,\s*(0|1|0?\.\d+)\s*)?\)"),
    "named_color": re.compile(r"transparent|[a-zA-Z]+"),
    "font_weight": re.compile(r"100|200|300|400|500|600|700|800|900"),
    "normal": re.compile(r"normal"),
    "none": re.compile(r"none"),
    "text_align": re.compile(r"left|right|center|justify"),
    "text_transform": re.compile(r"uppercase|lowercase|capitalize|none"),
    "display": re.compile(
        r"block|inline|inline-block|flex|grid|none|inline-flex|inline-grid"
    ),
    "justify": re.compile(
        r"flex-start|flex-end|center|space-between|space-around|space-evenly"
    ),
    "items": re.compile(r"stretch|flex-start|flex-end|center|baseline"),
    "border_style": re.compile(
        r"none|solid|dashed|dotted|double|groove|ridge|inset|outset"
    ),
    "border_width": re.compile(r"-?\d+(\.\d+)?(px|em|rem)?"),
    "opacity": re.compile(r"0(\.\d+)?|1(\.0+)?"),
    "digit": re.compile(r"-?\d+"),
    "number": re.compile(r"-?\d+(\.\d+)?"),
    "position": re.compile(r"static|relative|absolute|fixed|sticky"),
    "float": re.compile(r"left|right|none"),
    "flex_keyword": re.compile(r"auto|none|initial"),
}


def matches(name: str, value: str) -> bool:
    """Return True if *value* fully matches the named pattern."""
    return PATTERNS[name].fullmatch(value) is not None


def any_of(*validators: Validator) -> Validator:
    """Union of validators."""
    return lambda value: any(v(value) for v in validators)


def all_of(*validators: Validator) -> Validator:
    """Intersection of validators."""
    return lambda value: all(v(value) for v in validators)


def _pattern(name: str) -> Validator:
    return lambda value: matches(name, value)


# ---------------------------------------------------------------------------
# Domain validators
# ---------------------------------------------------------------------------

is_css_math = any_of(_pattern("calc"), _pattern("clamp"), _pattern("min"), _pattern("max"))

length_unit = any_of(_pattern("length"), is_css_math)

spacing = length_unit

color = any_of(
    _pattern("hex"), _pattern("rgb"), _pattern("rgba"), _pattern("hsl"), _pattern("named_color")
)

font_weight = _pattern("font_weight")

line_height = any_of(_pattern("digit"), _pattern("normal"))

text_align = _pattern("text_align")

text_transform = _pattern("text_transform")

display = _pattern("display")

justify = _pattern("justify")

items = _pattern("items")

opacity = _pattern("opacity")

z_index = _pattern("digit")

position = _pattern("position")

float_ = _pattern("float")


def border(value: str) -> bool:
    """Each ``_``-separated part is a length, a border style or a color."""
    parts = value.strip().lower().split("_")
    return all(
        matches("length", part) or matches("border_style", part) or color(part)
        for part in parts
    )


def bg(value: str) -> bool:
    """A color or ``none``."""
    trimmed = value.strip().lower()
    return matches("none", trimmed) or color(trimmed)


def flex(value: str) -> bool:
    """``flex`` shorthand: one to three parts of number, length or keyword."""
    parts = value.strip().lower().split("_")
    if not 1 <= len(parts) <= 3:
        return False
    return all(
        matches("number", part) or length_unit(part) or matches("flex_keyword", part)
        for part in parts
    )


def text(value: str) -> bool:
    """Anything the ``text`` utility can turn into a declaration."""
    return color(value) or length_unit(value) or text_align(value) or text_transform(value)
