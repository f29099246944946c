"""Plugin utility registry: composite utilities registered by config plugins."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Callable, Literal, Union

from valcss.errors import PluginError

logger = logging.getLogger(__name__)

WILDCARD = "*"

Styles = Union[Mapping[str, str], str]
Variants = Union[Literal["*"], frozenset[str]]


@dataclass(frozen=True)
class PluginUtility:
    """A named utility and the variants it may be used with.

    ``styles`` is either a property -> value mapping or a space-separated
    string of other class tokens to compose.
    """

    name: str
    styles: Styles
    variants: Variants = frozenset()

    @property
    def is_composed(self) -> bool:
        return isinstance(self.styles, str)

    def allows(self, media_prefix: str | None, pseudo: str | None) -> bool:
        """True if any requested variant is on the allow-list."""
        if self.variants == WILDCARD:
            return True
        return (media_prefix is not None and media_prefix in self.variants) or (
            pseudo is not None and pseudo in self.variants
        )


def _normalize_variants(variants: str | Iterable[str] | None) -> Variants:
    if variants is None:
        return frozenset()
    if isinstance(variants, str):
        return WILDCARD if variants == WILDCARD else frozenset({variants})
    names = frozenset(str(v) for v in variants)
    return WILDCARD if WILDCARD in names else names


def _check_styles(name: str, styles: object) -> Styles:
    if isinstance(styles, str):
        return styles
    if isinstance(styles, Mapping):
        return {str(prop): str(value) for prop, value in styles.items()}
    raise PluginError(
        f"Utility '{name}' must map to a dict of declarations or a class string, "
        f"got {type(styles).__name__}",
        utility=name,
    )


class UtilityRegistry:
    """Registry of plugin utilities for one compile context.

    Latest-wins on name collision; variant lists are never merged.
    Insertion-order stable.
    """

    def __init__(self) -> None:
        self._utilities: dict[str, PluginUtility] = {}

    def register(
        self,
        utilities: Mapping[str, Styles],
        variants: str | Iterable[str] | None = (),
    ) -> None:
        """Register every utility in *utilities* with the same *variants*."""
        allowed = _normalize_variants(variants)
        for name, styles in utilities.items():
            self._utilities[name] = PluginUtility(
                name=name, styles=_check_styles(name, styles), variants=allowed
            )
            logger.debug("Registered utility %r (variants=%s)", name, allowed)

    def reset(self) -> None:
        """Remove every registered utility."""
        self._utilities.clear()

    def get(self, name: str) -> PluginUtility | None:
        """Look up a registered utility by name."""
        return self._utilities.get(name)

    def names(self) -> list[str]:
        """Return all registered utility names in registration order."""
        return list(self._utilities.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._utilities

    def __len__(self) -> int:
        return len(self._utilities)


@dataclass(frozen=True)
class PluginAPI:
    """The capability handed to each plugin callable."""

    add_utilities: Callable[..., None]


Plugin = Callable[[PluginAPI], object]


def apply_plugins(plugins: Iterable[Plugin], registry: UtilityRegistry) -> None:
    """Run each plugin against *registry* in order."""
    api = PluginAPI(add_utilities=registry.register)
    for plugin in plugins:
        plugin(api)
    logger.debug("Applied plugins; %d utilities registered", len(registry))
