"""Whitespace and comment minifier.

Quoted strings and unquoted ``url(...)`` arguments are copied through
untouched; every rule below applies only to the text between them.
"""

from __future__ import annotations

import re

__all__ = ["minify", "strip_comments"]

# Segments that must never be rewritten: "..." , '...' and bare url(...)
_PROTECTED = r"""
    "(?:\\.|[^"\\])*"            # double-quoted string
    | '(?:\\.|[^'\\])*'          # single-quoted string
    | url\([^)"']*\)             # unquoted url() argument
"""

_PROTECTED_RE = re.compile(f"({_PROTECTED})", re.VERBOSE | re.IGNORECASE)

_COMMENT_RE = re.compile(
    rf"""
    (?P<keep>{_PROTECTED})
    | /\*[\s\S]*?(?:\*/|\Z)      # comment, unterminated runs to end of text
    """,
    re.VERBOSE | re.IGNORECASE,
)

_WHITESPACE_RE = re.compile(r"\s+")
_BRACE_SPACE_RE = re.compile(r"\s*([{}])\s*")
_TRAILING_SEMICOLON_RE = re.compile(r"\s*;[;\s]*}")


def strip_comments(text: str) -> str:
    """Remove ``/* ... */`` comments that are not inside a string or url().

    Repeats until stable: dropping a comment can join a "/" and a "*" into
    a new opener, as in ``//**/*x*/``.
    """
    while True:
        stripped = _COMMENT_RE.sub(lambda m: m.group("keep") or "", text)
        if stripped == text:
            return stripped
        text = stripped


def _tighten(part: str) -> str:
    part = _WHITESPACE_RE.sub(" ", part)
    part = part.replace(": ", ":")
    part = _BRACE_SPACE_RE.sub(r"\1", part)
    return _TRAILING_SEMICOLON_RE.sub("}", part)


def minify(css_text: str) -> str:
    """Strip comments and insignificant whitespace from *css_text*.

    Idempotent: ``minify(minify(x)) == minify(x)``.
    """
    text = strip_comments(css_text)
    # re.split with one capturing group alternates: outside, protected, outside, ...
    parts = _PROTECTED_RE.split(text)
    for i in range(0, len(parts), 2):
        parts[i] = _tighten(parts[i])
    return "".join(parts).strip()
