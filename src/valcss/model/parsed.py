"""ParsedClass: the structured result of splitting a class token."""

from __future__ import annotations

from dataclasses import dataclass, field

from valcss.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class ParsedClass:
    """Modifiers and base of a class token such as ``max-lg:focus:!text-[red]``.

    ``diagnostics`` carries parse-time warnings and is excluded from equality.
    """

    media_prefix: str | None
    is_max: bool
    pseudo: str | None
    base_class: str
    clean_base_class: str
    is_important: bool
    diagnostics: tuple[Diagnostic, ...] = field(default=(), compare=False)

    @property
    def has_variant(self) -> bool:
        return self.media_prefix is not None or self.pseudo is not None
