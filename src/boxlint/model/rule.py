"""Parsed stylesheet model: rules, at-rule context, and the document."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class AtRule:
    """The at-rule a rule was nested in. Only ``@media`` is tracked."""

    type: str  # "media"
    condition: str  # e.g. "(max-width: 768px)"


@dataclass(frozen=True)
class ParsedRule:
    """A selector with its declarations.

    Declaration keys are lower-cased property names; the last occurrence of a
    duplicated property wins. Selectors are not unique across a document: the
    same selector may appear in base CSS and in several media blocks.
    """

    selector: str
    declarations: Mapping[str, str] = field(default_factory=dict)
    at_rule: AtRule | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "declarations", MappingProxyType(dict(self.declarations))
        )

    @property
    def in_media(self) -> bool:
        return self.at_rule is not None and self.at_rule.type == "media"

    def get(self, prop: str) -> str | None:
        """Return the raw value for *prop*, or None if not declared."""
        return self.declarations.get(prop)


@dataclass(frozen=True)
class ParsedDocument:
    """All rules of a stylesheet: base rules in source order, then media rules."""

    rules: tuple[ParsedRule, ...] = ()

    def base_rules(self) -> list[ParsedRule]:
        return [r for r in self.rules if not r.in_media]

    def media_rules(self) -> list[ParsedRule]:
        return [r for r in self.rules if r.in_media]

    def media_conditions(self) -> list[str]:
        """Distinct media conditions in first-seen order."""
        seen: dict[str, None] = {}
        for rule in self.media_rules():
            seen.setdefault(rule.at_rule.condition, None)  # type: ignore[union-attr]
        return list(seen)
