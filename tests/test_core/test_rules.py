"""Tests for the style rule table."""

import pytest

from valcss.constants import DIRECT_KEYWORDS
from valcss.rules import (
    StyleRule,
    build_keyword_table,
    build_rule_table,
    default_keyword_table,
    default_rule_table,
)


@pytest.fixture(scope="module")
def rules():
    return build_rule_table()


def _gen(rules, key: str, value: str) -> str:
    rule = rules[key]
    assert rule.validate(value), f"{key}-[{value}] should validate"
    return rule.generate(value)


# ---------------------------------------------------------------------------
# Table structure
# ---------------------------------------------------------------------------


class TestTable:
    def test_spacing_keys(self, rules) -> None:
        for key in ("p", "px", "py", "pt", "pb", "pl", "pr", "m", "mx", "my", "mt", "mb", "ml", "mr"):
            assert key in rules

    def test_size_and_inset_keys(self, rules) -> None:
        for key in ("w", "h", "max-w", "min-w", "max-h", "min-h", "top", "left", "right", "bottom"):
            assert key in rules

    def test_composite_keys(self, rules) -> None:
        for key in ("text", "bg", "border", "font", "lh", "gap", "radius", "pos", "opacity", "z", "flex"):
            assert key in rules

    def test_rule_records_carry_key(self, rules) -> None:
        assert all(isinstance(r, StyleRule) and r.key == k for k, r in rules.items())

    def test_read_only(self, rules) -> None:
        with pytest.raises(TypeError):
            rules["p"] = rules["m"]

    def test_default_tables_cached(self) -> None:
        assert default_rule_table() is default_rule_table()
        assert default_keyword_table() is default_keyword_table()

    def test_keyword_table_covers_direct_keywords(self) -> None:
        assert set(build_keyword_table()) == set(DIRECT_KEYWORDS)


class TestKeywords:
    def test_display_keyword(self) -> None:
        rule = build_keyword_table()["flex"]
        assert rule.validate("anything")
        assert rule.generate("flex") == "display: flex;"

    def test_position_keyword(self) -> None:
        assert build_keyword_table()["absolute"].generate("absolute") == "position: absolute;"

    def test_flex_property_not_shadowed(self, rules) -> None:
        assert _gen(rules, "flex", "1") == "flex: 1;"


# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------


class TestSpacing:
    def test_all_sides(self, rules) -> None:
        assert _gen(rules, "p", "10px") == "padding: 10px;"

    def test_x_is_left_then_right(self, rules) -> None:
        assert _gen(rules, "px", "1rem") == "padding-left: 1rem; padding-right: 1rem;"

    def test_y_is_top_then_bottom(self, rules) -> None:
        assert _gen(rules, "my", "2em") == "margin-top: 2em; margin-bottom: 2em;"

    @pytest.mark.parametrize(
        "key,prop", [("pt", "padding-top"), ("mb", "margin-bottom"), ("pl", "padding-left"), ("mr", "margin-right")]
    )
    def test_single_side(self, rules, key: str, prop: str) -> None:
        assert _gen(rules, key, "4px") == f"{prop}: 4px;"

    def test_unitless_gets_px(self, rules) -> None:
        assert _gen(rules, "p", "10") == "padding: 10px;"
        assert _gen(rules, "m", "-4") == "margin: -4px;"

    def test_math_normalized(self, rules) -> None:
        assert _gen(rules, "pt", "calc(10px_+_5px)") == "padding-top: calc(10px + 5px);"

    def test_rejects_keywords(self, rules) -> None:
        assert not rules["p"].validate("auto")


class TestSize:
    def test_width_calc(self, rules) -> None:
        assert _gen(rules, "w", "calc(100%-20px)") == "width: calc(100% - 20px);"

    def test_max_height(self, rules) -> None:
        assert _gen(rules, "max-h", "50vh") == "max-height: 50vh;"

    def test_inset(self, rules) -> None:
        assert _gen(rules, "top", "0") == "top: 0;"

    def test_rejects_color(self, rules) -> None:
        assert not rules["w"].validate("red")


# ---------------------------------------------------------------------------
# Composite rules
# ---------------------------------------------------------------------------


class TestText:
    def test_color(self, rules) -> None:
        assert _gen(rules, "text", "#333") == "color: #333;"

    def test_font_size(self, rules) -> None:
        assert _gen(rules, "text", "14px") == "font-size: 14px;"

    def test_color_precedes_alignment(self, rules) -> None:
        # Bare words are valid named colors, so they take the color branch.
        assert _gen(rules, "text", "center") == "color: center;"


class TestBackground:
    def test_color(self, rules) -> None:
        assert _gen(rules, "bg", "#fff") == "background-color: #fff;"

    def test_rgba(self, rules) -> None:
        assert _gen(rules, "bg", "rgba(0,0,0,0.5)") == "background-color: rgba(0,0,0,0.5);"

    def test_none(self, rules) -> None:
        assert _gen(rules, "bg", "none") == "background: none;"

    def test_hsl(self, rules) -> None:
        assert _gen(rules, "bg", "hsl(0,0%,0%)") == "background-color: hsl(0,0%,0%);"


class TestBorder:
    def test_width(self, rules) -> None:
        assert _gen(rules, "border", "2px") == "border-width: 2px;"

    def test_style(self, rules) -> None:
        assert _gen(rules, "border", "dashed") == "border-style: dashed;"

    def test_color(self, rules) -> None:
        assert _gen(rules, "border", "#ccc") == "border-color: #ccc;"

    def test_shorthand(self, rules) -> None:
        assert _gen(rules, "border", "1px_solid_red") == "border: 1px solid red;"


class TestSingleProperty:
    @pytest.mark.parametrize(
        "key,value,expected",
        [
            ("font", "600", "font-weight: 600;"),
            ("lh", "normal", "line-height: normal;"),
            ("gap", "calc(1rem+2px)", "gap: calc(1rem + 2px);"),
            ("radius", "8px", "border-radius: 8px;"),
            ("pos", "relative", "position: relative;"),
            ("opacity", "0.5", "opacity: 0.5;"),
            ("z", "10", "z-index: 10;"),
            ("flex", "1_1_auto", "flex: 1 1 auto;"),
            ("d", "inline-block", "display: inline-block;"),
            ("float", "right", "float: right;"),
            ("justify", "space-between", "justify-content: space-between;"),
            ("items", "center", "align-items: center;"),
        ],
    )
    def test_generate(self, rules, key: str, value: str, expected: str) -> None:
        assert _gen(rules, key, value) == expected

    @pytest.mark.parametrize(
        "key,value", [("font", "bold"), ("opacity", "2"), ("z", "auto"), ("pos", "floating")]
    )
    def test_invalid(self, rules, key: str, value: str) -> None:
        assert not rules[key].validate(value)
