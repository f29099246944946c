"""CSS math normalizer for ``calc()``, ``clamp()``, ``min()`` and ``max()`` values.

Bracket values encode spaces as underscores, so ``calc(100%-2*10px)`` and
``calc(100%_-_2_*_10px)`` both become ``calc(100% - 2 * 10px)``.  Both
normalizers are idempotent and leave other values untouched.
"""

from __future__ import annotations

import re

__all__ = [
    "MATH_FUNCTIONS",
    "normalize_expression",
    "normalize_calc_expression",
    "normalize_css_math",
]

MATH_FUNCTIONS = ("calc", "clamp", "min", "max")

_OPERATOR_RE = re.compile(r"([-+*/])")
_WHITESPACE_RE = re.compile(r"\s+")
_CALL_RE = re.compile(r"(?<![A-Za-z0-9])(?:calc|clamp|min|max)\(")


def normalize_expression(body: str) -> str:
    """Space out the operators of a math function body."""
    spaced = body.replace("_", " ")
    spaced = _OPERATOR_RE.sub(r" \1 ", spaced)
    return _WHITESPACE_RE.sub(" ", spaced).strip()


def _closing_paren(value: str, open_index: int) -> int:
    """Index of the parenthesis closing the one at *open_index*, or -1."""
    depth = 0
    for i in range(open_index, len(value)):
        char = value[i]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _normalize_call(value: str, open_index: int) -> tuple[str, int] | None:
    """Normalize the call whose ``(`` sits at *open_index*.

    Returns the rewritten call text (from the ``(`` through the ``)``) and the
    index just past the original closing parenthesis.
    """
    close = _closing_paren(value, open_index)
    if close == -1:
        return None
    body = normalize_expression(value[open_index + 1 : close])
    return f"({body})", close + 1


def normalize_calc_expression(value: str) -> str:
    """Normalize *value* when it starts with a math function call.

    Only the leading call is rewritten; anything after it is kept as is.

    >>> normalize_calc_expression("calc(100%-50px+20px)")
    'calc(100% - 50px + 20px)'
    >>> normalize_calc_expression("10px")
    '10px'
    """
    for name in MATH_FUNCTIONS:
        if value.startswith(f"{name}("):
            result = _normalize_call(value, len(name))
            if result is None:
                return value
            call, end = result
            return name + call + value[end:]
    return value


def normalize_css_math(value: str) -> str:
    """Normalize every outermost math function call found in *value*."""
    out: list[str] = []
    pos = 0
    while True:
        match = _CALL_RE.search(value, pos)
        if match is None:
            break
        open_index = match.end() - 1
        result = _normalize_call(value, open_index)
        if result is None:
            break
        call, end = result
        out.append(value[pos:open_index])
        out.append(call)
        pos = end
    out.append(value[pos:])
    return "".join(out)
