"""Top-level block scanner.

Walks the stylesheet once, tracking brace depth and skipping comments and
quoted strings, and yields one span per top-level construct:

    @import "x.css";                 -> AT_RULE_STATEMENT
    @media (...) { .a { ... } }      -> AT_RULE_BLOCK
    .a, .b { color: red; }           -> SIMPLE_RULE
"""

from __future__ import annotations

import logging

from css_optimizer.model.stylesheet import (
    AtRuleBlock,
    ExtractedBlocks,
    SimpleRule,
    Span,
    SpanKind,
)
from css_optimizer.optimizer.minify import strip_comments

__all__ = ["extract_blocks", "scan"]

logger = logging.getLogger(__name__)


def _skip_comment(text: str, i: int) -> int:
    """Return the index just past the comment opening at *i*."""
    end = text.find("*/", i + 2)
    return len(text) if end == -1 else end + 2


def _skip_string(text: str, i: int) -> int:
    """Return the index just past the string whose quote is at *i*."""
    quote = text[i]
    n = len(text)
    j = i + 1
    while j < n:
        c = text[j]
        if c == "\\":
            j += 2
            continue
        if c == quote:
            return j + 1
        j += 1
    return n


def _skip_opaque(text: str, i: int) -> int:
    """If a comment or string starts at *i*, return the index after it, else -1."""
    c = text[i]
    if c == "/" and text.startswith("/*", i):
        return _skip_comment(text, i)
    if c in ("'", '"'):
        return _skip_string(text, i)
    return -1


def _find_block_end(text: str, open_index: int) -> tuple[int, bool, bool]:
    """Match the ``{`` at *open_index* against its closing brace.

    Returns ``(end, nested, terminated)`` where *end* is the index just past
    the closing brace (or ``len(text)`` when the block never closes) and
    *nested* tells whether any inner block was seen.
    """
    depth = 1
    nested = False
    i = open_index + 1
    n = len(text)
    while i < n:
        skipped = _skip_opaque(text, i)
        if skipped != -1:
            i = skipped
            continue
        c = text[i]
        if c == "{":
            depth += 1
            nested = True
        elif c == "}":
            depth -= 1
            if depth == 0:
                return i + 1, nested, True
        i += 1
    return n, nested, False


def _find_prelude_end(text: str, i: int, stops: str) -> int:
    """Return the index of the first top-level character in *stops*, or -1."""
    n = len(text)
    while i < n:
        skipped = _skip_opaque(text, i)
        if skipped != -1:
            i = skipped
            continue
        if text[i] in stops:
            return i
        i += 1
    return -1


def scan(css_text: str) -> tuple[Span, ...]:
    """Split *css_text* into top-level spans, in source order."""
    spans: list[Span] = []
    n = len(css_text)
    i = 0
    while i < n:
        c = css_text[i]
        if c.isspace() or c in ";}":
            # separators and stray closing braces between rules
            i += 1
            continue
        skipped = _skip_opaque(css_text, i)
        if skipped != -1:
            i = skipped
            continue

        start = i
        if c == "@":
            stop = _find_prelude_end(css_text, i, ";{")
            if stop == -1:
                spans.append(Span(SpanKind.AT_RULE_STATEMENT, start, n, css_text[start:]))
                break
            if css_text[stop] == ";":
                spans.append(
                    Span(SpanKind.AT_RULE_STATEMENT, start, stop + 1, css_text[start : stop + 1])
                )
                i = stop + 1
                continue
            end, _, terminated = _find_block_end(css_text, stop)
            if not terminated:
                logger.debug("unterminated at-rule block at offset %d", start)
            spans.append(
                Span(SpanKind.AT_RULE_BLOCK, start, end, css_text[start:end], open_brace=stop)
            )
            i = end
            continue

        stop = _find_prelude_end(css_text, i, "{}")
        if stop == -1:
            logger.debug("dropping trailing fragment at offset %d", start)
            break
        if css_text[stop] == "}":
            # selector text with no opening brace
            logger.debug("dropping unmatched fragment at offset %d", start)
            i = stop + 1
            continue
        end, nested, terminated = _find_block_end(css_text, stop)
        if not terminated:
            logger.debug("dropping unterminated rule at offset %d", start)
            break
        spans.append(
            Span(
                SpanKind.SIMPLE_RULE,
                start,
                end,
                css_text[start:end],
                open_brace=stop,
                nested=nested,
            )
        )
        i = end
    return tuple(spans)


def extract_blocks(css_text: str, preserve_at_rules: bool = True) -> ExtractedBlocks:
    """Group the spans of *css_text* into statements, at-rule blocks and simple rules.

    At-rule blocks are always recognised, so their nested rules never leak
    out as simple rules; they are only kept when *preserve_at_rules* is set.
    """
    statements: list[str] = []
    at_rule_blocks: list[AtRuleBlock] = []
    simple_rules: list[SimpleRule] = []

    for span in scan(css_text):
        if span.kind is SpanKind.AT_RULE_STATEMENT:
            statements.append(span.text)
        elif span.kind is SpanKind.AT_RULE_BLOCK:
            if preserve_at_rules:
                at_rule_blocks.append(AtRuleBlock(text=span.text, start=span.start, end=span.end))
        else:
            selector = strip_comments(css_text[span.start : span.open_brace]).strip()
            body = strip_comments(css_text[span.open_brace + 1 : span.end - 1])
            simple_rules.append(
                SimpleRule(selector=selector, declarations=body, nested=span.nested, raw=span.text)
            )

    logger.debug(
        "extracted %d statements, %d at-rule blocks, %d simple rules",
        len(statements),
        len(at_rule_blocks),
        len(simple_rules),
    )
    return ExtractedBlocks(
        statements=tuple(statements),
        at_rule_blocks=tuple(at_rule_blocks),
        simple_rules=tuple(simple_rules),
    )
