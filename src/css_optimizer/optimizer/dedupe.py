"""Per-rule declaration deduplication.

Policy: the first occurrence of a property fixes its position, the last
occurrence supplies its value::

    color:red; margin:0; color:blue   ->   color:blue;margin:0;
"""

from __future__ import annotations

from collections.abc import Iterator

from css_optimizer.model.stylesheet import Declaration

__all__ = ["DeclarationList", "dedupe", "parse_declarations", "split_declarations"]


class DeclarationList:
    """Ordered declarations keyed by exact property name."""

    def __init__(self) -> None:
        self._entries: list[Declaration] = []
        self._index: dict[str, int] = {}

    def add(self, name: str, value: str) -> None:
        """Append a new property, or overwrite the value of a known one in place."""
        declaration = Declaration(name=name, value=value)
        position = self._index.get(name)
        if position is None:
            self._index[name] = len(self._entries)
            self._entries.append(declaration)
        else:
            self._entries[position] = declaration

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def render(self) -> str:
        if not self._entries:
            return ""
        return ";".join(d.render() for d in self._entries) + ";"


def split_declarations(text: str) -> list[str]:
    """Split on ``;`` outside of parentheses and quoted strings.

    Keeps values such as ``url(data:image/png;base64,...)`` in one piece.
    """
    parts: list[str] = []
    depth = 0
    quote = ""
    start = 0
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if quote:
            if c == "\\":
                i += 2
                continue
            if c == quote:
                quote = ""
        elif c in ("'", '"'):
            quote = c
        elif c == "(":
            depth += 1
        elif c == ")":
            depth = max(depth - 1, 0)
        elif c == ";" and depth == 0:
            parts.append(text[start:i])
            start = i + 1
        i += 1
    parts.append(text[start:])
    return parts


def parse_declarations(text: str) -> DeclarationList:
    declarations = DeclarationList()
    for segment in split_declarations(text):
        segment = segment.strip()
        if not segment or ":" not in segment:
            continue
        name, value = segment.split(":", 1)
        name = name.strip()
        if not name:
            continue
        declarations.add(name, value.strip())
    return declarations


def dedupe(declaration_text: str) -> str:
    """Return *declaration_text* with each property kept once.

    An empty or declaration-free input yields ``""``.
    """
    return parse_declarations(declaration_text).render()
