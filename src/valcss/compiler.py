"""CSS class compiler: turns one class token into a CSS rule.

Resolution order for the clean base class:

1. a plugin utility registered under that exact name;
2. a direct keyword (``block``, ``absolute``);
3. bracket syntax ``key-[value]`` looked up in the rule table;
4. dash syntax ``key-value`` with the longest matching rule key.

Problems with a single token are reported as diagnostics on the returned
:class:`CompileResult`; nothing here raises for malformed class names.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from valcss.breakpoints import build_breakpoints, media_query
from valcss.config import ValcssConfig
from valcss.model.diagnostic import Diagnostic, warning
from valcss.model.parsed import ParsedClass
from valcss.parser import parse_class_string
from valcss.plugins import Plugin, PluginUtility, UtilityRegistry, apply_plugins
from valcss.rules import StyleRule, default_keyword_table, default_rule_table

__all__ = [
    "BRACKET_RE",
    "CompileContext",
    "CompileResult",
    "Compiler",
    "escape_class",
    "compile_class",
    "make_important",
]

BRACKET_RE = re.compile(r"^([\w-]+)-\[(.+)\]$")

_ESCAPE_RE = re.compile(r"([ !\"#$%&'()*+,./:;<=>?@\[\\\]^`{|}~])")

# Splits a declaration block into its individual "prop: value;" parts.
_DECLARATION_RE = re.compile(r"[^;]+;")


def escape_class(class_name: str) -> str:
    r"""Backslash-escape CSS selector metacharacters.

    >>> escape_class("md:p-[10px]")
    'md\\:p-\\[10px\\]'
    """
    return _ESCAPE_RE.sub(r"\\\1", class_name)


def make_important(declarations: str) -> str:
    """Mark every declaration in *declarations* ``!important``."""
    parts = [part.strip() for part in _DECLARATION_RE.findall(declarations)]
    return " ".join(f"{part[:-1].rstrip()} !important;" for part in parts if part != ";")


@dataclass
class CompileContext:
    """Everything a compile run reads: breakpoints, rule tables and plugins."""

    breakpoints: Mapping[str, int]
    registry: UtilityRegistry = field(default_factory=UtilityRegistry)
    rules: Mapping[str, StyleRule] = field(default_factory=default_rule_table)
    keywords: Mapping[str, StyleRule] = field(default_factory=default_keyword_table)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        breakpoints: Mapping[str, object] | None = None,
        plugins: Iterable[Plugin] = (),
    ) -> CompileContext:
        """Build a context from breakpoint overrides and plugin callables.

        Breakpoint problems are kept on ``context.diagnostics``.
        """
        table, diagnostics = build_breakpoints(breakpoints)
        context = cls(breakpoints=table, diagnostics=diagnostics)
        apply_plugins(plugins, context.registry)
        return context

    @classmethod
    def from_config(cls, config: ValcssConfig) -> CompileContext:
        """Build a fresh context (empty registry, plugins replayed) from *config*."""
        return cls.create(breakpoints=config.breakpoints, plugins=config.plugins)


@dataclass
class CompileResult:
    """CSS text for one token (None when it produced nothing) plus diagnostics."""

    css: str | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.css is not None


class Compiler:
    """Compile class tokens against a :class:`CompileContext`."""

    def __init__(self, context: CompileContext) -> None:
        self.context = context
        self._composing: list[str] = []

    def compile(self, token: str, declarations_only: bool = False) -> CompileResult:
        """Compile *token* into a CSS rule.

        With *declarations_only* the bare declarations are returned, without
        selector, pseudo-class or media query.
        """
        parsed = parse_class_string(token, self.context.breakpoints)
        diagnostics = list(parsed.diagnostics)

        utility = self.context.registry.get(parsed.clean_base_class)
        if utility is not None:
            css = self._compile_utility(token, parsed, utility, declarations_only, diagnostics)
            return CompileResult(css=css, diagnostics=diagnostics)

        resolved = self._resolve_rule(parsed.clean_base_class)
        if resolved is None:
            diagnostics.append(
                warning("unknown_class", f"Invalid class or value: {token}", token=token)
            )
            return CompileResult(css=None, diagnostics=diagnostics)

        rule, value = resolved
        if not rule.validate(value):
            diagnostics.append(
                warning(
                    "invalid_value",
                    f"Invalid value {value!r} for '{rule.key}' in class: {token}",
                    token=token,
                )
            )
            return CompileResult(css=None, diagnostics=diagnostics)

        declarations = rule.generate(value)
        if parsed.is_important:
            declarations = make_important(declarations)
        if declarations_only:
            return CompileResult(css=declarations, diagnostics=diagnostics)
        return CompileResult(css=self._emit(token, parsed, declarations), diagnostics=diagnostics)

    def compile_css(self, token: str) -> str | None:
        """Compile *token* and return only the CSS text."""
        return self.compile(token).css

    # --- resolution -----------------------------------------------------------

    def _resolve_rule(self, clean: str) -> tuple[StyleRule, str] | None:
        keyword = self.context.keywords.get(clean)
        if keyword is not None:
            return keyword, clean

        match = BRACKET_RE.match(clean)
        if match:
            rule = self.context.rules.get(match.group(1))
            if rule is None:
                return None
            return rule, match.group(2)

        if "[" in clean:
            return None
        return self._resolve_dash(clean)

    def _resolve_dash(self, clean: str) -> tuple[StyleRule, str] | None:
        """``text-red`` -> (text rule, "red"), preferring the longest key."""
        candidates = [i for i, char in enumerate(clean) if char == "-" and i > 0]
        for index in reversed(candidates):
            key, value = clean[:index], clean[index + 1:]
            if not value:
                continue
            rule = self.context.rules.get(key)
            if rule is not None:
                return rule, value
        return None

    # --- plugin utilities ------------------------------------------------------

    def _compile_utility(
        self,
        token: str,
        parsed: ParsedClass,
        utility: PluginUtility,
        declarations_only: bool,
        diagnostics: list[Diagnostic],
    ) -> str | None:
        if parsed.has_variant and not utility.allows(parsed.media_prefix, parsed.pseudo):
            diagnostics.append(
                warning("variant_not_allowed", f"Variant not allowed for: {token}", token=token)
            )
            return None

        body = self._utility_body(token, utility, diagnostics)
        if not body:
            if body is not None:
                diagnostics.append(
                    warning(
                        "empty_utility",
                        f"Utility '{utility.name}' produced no declarations",
                        token=token,
                    )
                )
            return None
        if parsed.is_important:
            body = make_important(body)
        if declarations_only:
            return body
        return self._emit(token, parsed, body)

    def _utility_body(
        self, token: str, utility: PluginUtility, diagnostics: list[Diagnostic]
    ) -> str | None:
        styles = utility.styles
        if isinstance(styles, Mapping):
            return " ".join(f"{prop}: {value};" for prop, value in styles.items())

        if utility.name in self._composing:
            diagnostics.append(
                warning(
                    "compose_cycle",
                    f"Utility '{utility.name}' composes itself via "
                    f"{' -> '.join(self._composing + [utility.name])}",
                    token=token,
                )
            )
            return None

        self._composing.append(utility.name)
        try:
            parts: list[str] = []
            for cls_name in styles.split():
                result = self.compile(cls_name, declarations_only=True)
                diagnostics.extend(result.diagnostics)
                if result.css:
                    parts.append(result.css)
        finally:
            self._composing.pop()
        return " ".join(parts)

    # --- emission ---------------------------------------------------------------

    def _emit(self, token: str, parsed: ParsedClass, declarations: str) -> str:
        selector = f".{escape_class(token)}"
        if parsed.pseudo:
            selector += f":{parsed.pseudo}"
        rule = f"{selector} {{ {declarations} }}"
        if parsed.media_prefix:
            query = media_query(self.context.breakpoints, parsed.media_prefix, parsed.is_max)
            return f"{query} {{\n  {rule}\n}}"
        return rule


def compile_class(
    token: str, context: CompileContext, declarations_only: bool = False
) -> CompileResult:
    """Compile a single *token* against *context*."""
    return Compiler(context).compile(token, declarations_only=declarations_only)
