"""Style rule table: class key -> validator and declaration generator.

The table is assembled from a handful of generator templates (spacing,
size/inset, single-property) plus the composite ``text``, ``bg`` and
``border`` rules.  Direct keywords such as ``block`` or ``absolute`` live in a
separate table so that ``flex`` (a keyword) and ``flex-[1]`` (a property) do
not shadow each other.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Callable

from valcss import validators
from valcss.constants import (
    DISPLAY_VALUES,
    INSET_PROPERTIES,
    POSITION_VALUES,
    SIZE_PROPERTIES,
    SPACING_DIRECTIONS,
    SPACING_PROPERTIES,
)
from valcss.cssmath import normalize_css_math

Generator = Callable[[str], str]


@dataclass(frozen=True)
class StyleRule:
    """A class key paired with its value validator and declaration generator."""

    key: str
    validate: validators.Validator
    generate: Generator


def _always(value: str) -> bool:
    return True


def _declaration(prop: str) -> Generator:
    return lambda value: f"{prop}: {value};"


def _math_declaration(prop: str) -> Generator:
    return lambda value: f"{prop}: {normalize_css_math(value)};"


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


def keyword_rules(prop: str, values: tuple[str, ...]) -> dict[str, StyleRule]:
    """Rules for classes that are the value itself (``block`` -> display)."""
    return {
        value: StyleRule(key=value, validate=_always, generate=_declaration(prop))
        for value in values
    }


def _spacing_generator(prop: str, sides: tuple[str, ...]) -> Generator:
    def generate(value: str) -> str:
        css_value = normalize_css_math(value)
        if validators.matches("number", css_value):
            css_value = f"{css_value}px"
        if sides == ("",):
            return f"{prop}: {css_value};"
        return " ".join(f"{prop}-{side}: {css_value};" for side in sides)

    return generate


def spacing_rules(prop: str) -> dict[str, StyleRule]:
    """``p``, ``px``, ``py``, ``pt`` ... for padding; likewise for margin."""
    prefix = SPACING_PROPERTIES[prop]
    rules: dict[str, StyleRule] = {}
    for suffix, sides in SPACING_DIRECTIONS.items():
        key = prefix + suffix
        rules[key] = StyleRule(
            key=key,
            validate=validators.spacing,
            generate=_spacing_generator(prop, sides),
        )
    return rules


def size_rules(properties: Mapping[str, str]) -> dict[str, StyleRule]:
    """Length-valued single-property rules (width, height, insets)."""
    return {
        key: StyleRule(key=key, validate=validators.length_unit, generate=_math_declaration(prop))
        for key, prop in properties.items()
    }


def _single(
    key: str, prop: str, validate: validators.Validator, math: bool = False
) -> StyleRule:
    generate = _math_declaration(prop) if math else _declaration(prop)
    return StyleRule(key=key, validate=validate, generate=generate)


# ---------------------------------------------------------------------------
# Composite generators
# ---------------------------------------------------------------------------


def _generate_text(value: str) -> str:
    if validators.color(value):
        return f"color: {value};"
    if validators.text_align(value):
        return f"text-align: {value};"
    if validators.text_transform(value):
        return f"text-transform: {value};"
    return f"font-size: {normalize_css_math(value)};"


def _generate_bg(value: str) -> str:
    trimmed = value.strip().lower()
    if validators.matches("none", trimmed):
        return f"background: {value};"
    if validators.color(trimmed):
        return f"background-color: {value};"
    return f"background: {value};"


def _generate_border(value: str) -> str:
    trimmed = value.strip().lower()
    if validators.matches("border_width", trimmed):
        return f"border-width: {value};"
    if validators.matches("border_style", trimmed):
        return f"border-style: {value};"
    if validators.color(value):
        return f"border-color: {value};"
    return f"border: {value.replace('_', ' ')};"


def _generate_flex(value: str) -> str:
    return f"flex: {normalize_css_math(value).replace('_', ' ')};"


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def build_rule_table() -> Mapping[str, StyleRule]:
    """Build the read-only property-key table used for ``key-[value]`` classes."""
    table: dict[str, StyleRule] = {}
    table.update(spacing_rules("padding"))
    table.update(spacing_rules("margin"))
    table.update(size_rules(SIZE_PROPERTIES))
    table.update(size_rules(INSET_PROPERTIES))
    for rule in (
        StyleRule(key="text", validate=validators.text, generate=_generate_text),
        _single("font", "font-weight", validators.font_weight),
        _single("lh", "line-height", validators.line_height),
        StyleRule(key="bg", validate=validators.bg, generate=_generate_bg),
        _single("d", "display", validators.display),
        _single("float", "float", validators.float_),
        _single("justify", "justify-content", validators.justify),
        _single("items", "align-items", validators.items),
        _single("gap", "gap", validators.length_unit, math=True),
        StyleRule(key="border", validate=validators.border, generate=_generate_border),
        _single("radius", "border-radius", validators.length_unit, math=True),
        _single("pos", "position", validators.position),
        _single("opacity", "opacity", validators.opacity),
        _single("z", "z-index", validators.z_index),
        StyleRule(key="flex", validate=validators.flex, generate=_generate_flex),
    ):
        table[rule.key] = rule
    return MappingProxyType(table)


def build_keyword_table() -> Mapping[str, StyleRule]:
    """Build the read-only table of direct keyword classes."""
    table: dict[str, StyleRule] = {}
    table.update(keyword_rules("position", POSITION_VALUES))
    table.update(keyword_rules("display", DISPLAY_VALUES))
    return MappingProxyType(table)


@lru_cache(maxsize=None)
def default_rule_table() -> Mapping[str, StyleRule]:
    """Process-wide rule table, built on first use."""
    return build_rule_table()


@lru_cache(maxsize=None)
def default_keyword_table() -> Mapping[str, StyleRule]:
    """Process-wide keyword table, built on first use."""
    return build_keyword_table()
