"""Tests for the class token parser."""

import pytest

from valcss.breakpoints import DEFAULT_BREAKPOINTS
from valcss.model.parsed import ParsedClass
from valcss.parser import base_segment, parse_class_string, split_class_token


def _parse(token: str) -> ParsedClass:
    return parse_class_string(token, DEFAULT_BREAKPOINTS)


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


class TestSplitClassToken:
    def test_bare_class(self) -> None:
        parts = split_class_token("block")
        assert parts is not None
        assert parts.modifiers == []
        assert parts.base == "block"

    def test_modifiers_and_base(self) -> None:
        parts = split_class_token("md:hover:p-[10px]")
        assert parts is not None
        assert parts.modifiers == ["md", "hover"]
        assert parts.base == "p-[10px]"

    def test_important_kept_on_base(self) -> None:
        parts = split_class_token("focus:!bg-[#fff]")
        assert parts is not None
        assert parts.base == "!bg-[#fff]"

    def test_colon_inside_brackets(self) -> None:
        parts = split_class_token("hover:bg-[url(a:b)]")
        assert parts is not None
        assert parts.modifiers == ["hover"]
        assert parts.base == "bg-[url(a:b)]"

    @pytest.mark.parametrize("token", ["", "md:", ":p-[1px]", "md::p-[1px]", "!!x", "p-[10px", "!"])
    def test_malformed_returns_none(self, token: str) -> None:
        assert split_class_token(token) is None


class TestBaseSegment:
    def test_last_segment(self) -> None:
        assert base_segment("md:hover:flex-center") == "flex-center"

    def test_malformed_falls_back_to_rsplit(self) -> None:
        assert base_segment("md::block") == "block"


# ---------------------------------------------------------------------------
# Media prefixes
# ---------------------------------------------------------------------------


class TestMediaPrefix:
    def test_min_width_prefix(self) -> None:
        parsed = _parse("md:p-[10px]")
        assert parsed.media_prefix == "md"
        assert parsed.is_max is False

    def test_max_prefix(self) -> None:
        parsed = _parse("max-lg:p-[10px]")
        assert parsed.media_prefix == "lg"
        assert parsed.is_max is True

    def test_unknown_max_prefix_is_not_media(self) -> None:
        parsed = _parse("max-huge:p-[10px]")
        assert parsed.media_prefix is None
        assert parsed.is_max is False

    def test_custom_breakpoint(self) -> None:
        parsed = parse_class_string("tablet:block", {"tablet": 900})
        assert parsed.media_prefix == "tablet"

    def test_media_only_from_first_segment(self) -> None:
        parsed = _parse("hover:md:p-[10px]")
        assert parsed.media_prefix is None
        assert parsed.pseudo == "hover"

    def test_misplaced_media_warns(self) -> None:
        parsed = _parse("hover:md:p-[10px]")
        assert len(parsed.diagnostics) == 1
        diag = parsed.diagnostics[0]
        assert diag.code == "misplaced_media_prefix"
        assert diag.is_warning
        assert diag.token == "hover:md:p-[10px]"

    def test_misplaced_max_prefix_warns(self) -> None:
        parsed = _parse("md:max-sm:block")
        assert parsed.media_prefix == "md"
        assert [d.code for d in parsed.diagnostics] == ["misplaced_media_prefix"]

    def test_first_segment_media_does_not_warn(self) -> None:
        assert _parse("max-md:hover:block").diagnostics == ()


# ---------------------------------------------------------------------------
# Pseudo classes
# ---------------------------------------------------------------------------


class TestPseudo:
    def test_pseudo_without_media(self) -> None:
        parsed = _parse("hover:p-[10px]")
        assert parsed.pseudo == "hover"
        assert parsed.media_prefix is None

    def test_pseudo_after_media(self) -> None:
        assert _parse("md:focus:block").pseudo == "focus"

    def test_last_pseudo_wins(self) -> None:
        assert _parse("hover:focus:active:block").pseudo == "active"

    def test_unknown_modifier_ignored(self) -> None:
        parsed = _parse("dark:block")
        assert parsed.pseudo is None
        assert parsed.media_prefix is None
        assert parsed.diagnostics == ()


# ---------------------------------------------------------------------------
# Important marker and full results
# ---------------------------------------------------------------------------


class TestImportant:
    def test_important_stripped(self) -> None:
        parsed = _parse("!bg-[#fff]")
        assert parsed.is_important is True
        assert parsed.base_class == "!bg-[#fff]"
        assert parsed.clean_base_class == "bg-[#fff]"

    def test_not_important(self) -> None:
        parsed = _parse("bg-[#fff]")
        assert parsed.is_important is False
        assert parsed.clean_base_class == parsed.base_class


class TestFullParse:
    def test_media_hover_padding(self) -> None:
        assert _parse("md:hover:p-[10px]") == ParsedClass(
            media_prefix="md",
            is_max=False,
            pseudo="hover",
            base_class="p-[10px]",
            clean_base_class="p-[10px]",
            is_important=False,
        )

    def test_max_focus_important(self) -> None:
        assert _parse("max-lg:focus:!text-red-500") == ParsedClass(
            media_prefix="lg",
            is_max=True,
            pseudo="focus",
            base_class="!text-red-500",
            clean_base_class="text-red-500",
            is_important=True,
        )

    def test_malformed_degrades(self) -> None:
        parsed = _parse("md::!p-[1px]")
        assert parsed.media_prefix is None
        assert parsed.pseudo is None
        assert parsed.is_important is False
        assert parsed.base_class == "md::!p-[1px]"

    def test_has_variant(self) -> None:
        assert _parse("md:block").has_variant
        assert _parse("hover:block").has_variant
        assert not _parse("block").has_variant
