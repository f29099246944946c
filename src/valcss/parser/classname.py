"""Lark-based splitter and parser for utility class tokens."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import NamedTuple, cast

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from valcss.constants import PSEUDO_PREFIXES
from valcss.model.diagnostic import Diagnostic, warning
from valcss.model.parsed import ParsedClass

GRAMMAR_PATH = Path(__file__).parent / "classname.lark"

MAX_PREFIX = "max-"


class ClassParts(NamedTuple):
    """Modifier segments and the base segment (``!`` included) of a token."""

    modifiers: list[str]
    base: str


class _Base(NamedTuple):
    segment: str
    important: bool


class ClassTokenTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a class-token parse tree into :class:`ClassParts`."""

    def modifier(self, items: list[Token]) -> str:
        return str(items[0])

    def base(self, items: list[Token]) -> _Base:
        return _Base(segment=str(items[-1]), important=len(items) == 2)

    def start(self, items: list[object]) -> ClassParts:
        base = cast(_Base, items[-1])
        modifiers = [str(m) for m in items[:-1]]
        prefix = "!" if base.important else ""
        return ClassParts(modifiers=modifiers, base=prefix + base.segment)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def split_class_token(token: str) -> ClassParts | None:
    """Split *token* into modifiers and base, or None if it is malformed."""
    try:
        tree = _parser().parse(token)
    except UnexpectedInput:
        return None
    return ClassTokenTransformer().transform(tree)


def base_segment(token: str) -> str:
    """The final ``:``-separated segment of *token*."""
    parts = split_class_token(token)
    if parts is None:
        return token.rsplit(":", 1)[-1]
    return parts.base


def _media_of(segment: str, breakpoints: Mapping[str, int]) -> tuple[str, bool] | None:
    if segment.startswith(MAX_PREFIX) and segment[len(MAX_PREFIX):] in breakpoints:
        return segment[len(MAX_PREFIX):], True
    if segment in breakpoints:
        return segment, False
    return None


def parse_class_string(token: str, breakpoints: Mapping[str, int]) -> ParsedClass:
    """Parse a class token into its media, pseudo, important and base parts.

    Only the first segment can select a media query.  Pseudo segments may
    appear anywhere among the modifiers; the last one wins.  Malformed tokens
    parse as a bare base class with no modifiers.

    >>> parse_class_string("md:hover:p-[10px]", {"md": 768}).pseudo
    'hover'
    """
    parts = split_class_token(token)
    if parts is None:
        return ParsedClass(
            media_prefix=None,
            is_max=False,
            pseudo=None,
            base_class=token,
            clean_base_class=token,
            is_important=False,
        )

    media_prefix: str | None = None
    is_max = False
    first_pseudo_index = 0
    if parts.modifiers:
        media = _media_of(parts.modifiers[0], breakpoints)
        if media is not None:
            media_prefix, is_max = media
            first_pseudo_index = 1

    pseudo: str | None = None
    diagnostics: list[Diagnostic] = []
    for index, segment in enumerate(parts.modifiers):
        if index > 0 and (segment in breakpoints or segment.startswith(MAX_PREFIX)):
            diagnostics.append(
                warning(
                    "misplaced_media_prefix",
                    f'Media prefix "{segment}" must appear only as the first segment',
                    token=token,
                )
            )
        if index >= first_pseudo_index and segment in PSEUDO_PREFIXES:
            pseudo = segment

    base_class = parts.base
    is_important = base_class.startswith("!")
    return ParsedClass(
        media_prefix=media_prefix,
        is_max=is_max,
        pseudo=pseudo,
        base_class=base_class,
        clean_base_class=base_class[1:] if is_important else base_class,
        is_important=is_important,
        diagnostics=tuple(diagnostics),
    )
