"""Values derived from stylesheet text: scanner spans, rules and declarations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SpanKind(StrEnum):
    AT_RULE_BLOCK = "at_rule_block"  # @media ... { ... }
    AT_RULE_STATEMENT = "at_rule_statement"  # @import ...;
    SIMPLE_RULE = "simple_rule"  # selector { declarations }


@dataclass(frozen=True)
class Span:
    """A top-level region of the source text, ``text == source[start:end]``."""

    kind: SpanKind
    start: int
    end: int
    text: str
    open_brace: int = -1  # absolute index of the first top-level "{", if any
    nested: bool = False  # body contains inner blocks


@dataclass(frozen=True)
class Declaration:
    name: str
    value: str

    def render(self) -> str:
        return f"{self.name}:{self.value}"


@dataclass(frozen=True)
class SimpleRule:
    """A top-level ``selector { declarations }`` pair.

    ``nested`` is set when the body contains blocks of its own (CSS nesting);
    such rules are re-emitted verbatim instead of being deduplicated.
    """

    selector: str
    declarations: str
    nested: bool = False
    raw: str = ""


@dataclass(frozen=True)
class AtRuleBlock:
    """An opaque ``@...{...}`` span, stored and re-emitted byte for byte."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class ExtractedBlocks:
    statements: tuple[str, ...] = ()
    at_rule_blocks: tuple[AtRuleBlock, ...] = ()
    simple_rules: tuple[SimpleRule, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.statements or self.at_rule_blocks or self.simple_rules)
