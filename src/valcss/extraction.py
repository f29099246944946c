"""Class extraction from markup and combined CSS generation."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from valcss.compiler import CompileContext, Compiler
from valcss.model.diagnostic import Diagnostic
from valcss.parser import base_segment

__all__ = ["BuildResult", "extract_classes", "generate_css", "is_candidate"]

_CLASS_ATTR_RE = re.compile(r"""class\s*=\s*["']([^"']+)["']""")

# p-[10px], md:p-[10px], !bg-[red], hover:!m-[5px]
_BRACKET_TOKEN_RE = re.compile(r"^((?:[\w-]+:)*)(!?[\w-]+)-\[(.+)\]$")


@dataclass
class BuildResult:
    """Combined CSS for a set of documents."""

    css: str
    classes: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


def is_candidate(token: str, context: CompileContext) -> bool:
    """True if *token* looks like something the compiler can handle."""
    base = base_segment(token)
    if base.startswith("!"):
        base = base[1:]
    if base in context.keywords:
        return True
    if _BRACKET_TOKEN_RE.match(token):
        return True
    return base in context.registry


def _dedupe(tokens: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(tokens))


def extract_classes(document: str, context: CompileContext) -> list[str]:
    """Candidate class tokens of a comment-stripped *document*, deduplicated."""
    tokens: list[str] = []
    for match in _CLASS_ATTR_RE.finditer(document):
        tokens.extend(match.group(1).split())
    return _dedupe(t for t in tokens if is_candidate(t, context))


def generate_css(documents: Iterable[str], context: CompileContext) -> BuildResult:
    """Compile every candidate class of *documents* into one stylesheet.

    Tokens are compiled once, in order of first appearance across all
    documents.  Tokens that produce nothing are left out; their diagnostics
    are collected on the result.
    """
    classes = _dedupe(cls for doc in documents for cls in extract_classes(doc, context))
    compiler = Compiler(context)
    rules: list[str] = []
    diagnostics: list[Diagnostic] = []
    for cls in classes:
        result = compiler.compile(cls)
        diagnostics.extend(result.diagnostics)
        if result.css:
            rules.append(result.css)
    return BuildResult(css="\n".join(rules), classes=classes, diagnostics=diagnostics)
