"""Breakpoint table: named pixel thresholds used for media queries."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType

from valcss.model.diagnostic import Diagnostic, warning

logger = logging.getLogger(__name__)

DEFAULT_BREAKPOINTS: Mapping[str, int] = MappingProxyType({
    "xs": 480,
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
    "xxl": 1536,
})

# "768", "768px", "768.5px"
_PIXEL_RE = re.compile(r"(?P<px>\d+)(?:\.\d+)?(?:px)?")


def _coerce_pixels(value: object) -> int | None:
    """Return *value* as a positive pixel count, or None when unusable."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float):
        return int(value) if value >= 1 else None
    if isinstance(value, str):
        match = _PIXEL_RE.fullmatch(value.strip())
        if match:
            px = int(match.group("px"))
            return px if px > 0 else None
    return None


def build_breakpoints(
    overrides: Mapping[str, object] | None = None,
) -> tuple[Mapping[str, int], list[Diagnostic]]:
    """Merge user *overrides* over the defaults.

    Invalid override entries are dropped (the default, if any, is kept) and
    reported as ``invalid_breakpoint`` warnings.  The returned table is
    read-only.
    """
    table = dict(DEFAULT_BREAKPOINTS)
    diagnostics: list[Diagnostic] = []
    for name, raw in (overrides or {}).items():
        px = _coerce_pixels(raw)
        if px is None:
            default = DEFAULT_BREAKPOINTS.get(name)
            fallback = f'using default value "{default}"' if default else "ignoring it"
            diagnostics.append(
                warning(
                    "invalid_breakpoint",
                    f'Invalid breakpoint value for "{name}": {raw!r}; {fallback}.',
                )
            )
            continue
        table[name] = px
    logger.debug("Breakpoints: %s", table)
    return MappingProxyType(table), diagnostics


def media_query(breakpoints: Mapping[str, int], name: str, is_max: bool) -> str:
    """Build the ``@media`` prelude for breakpoint *name*."""
    px = breakpoints[name]
    if is_max:
        return f"@media (max-width: {px - 1}px)"
    return f"@media (min-width: {px}px)"
