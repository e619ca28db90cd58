"""Rewrite relative ``url(...)`` references against a base location."""

from __future__ import annotations

import logging
import re
from urllib.parse import urlsplit

__all__ = ["is_absolute", "join_path", "rewrite_urls"]

logger = logging.getLogger(__name__)

_URL_RE = re.compile(
    r"""
    (?P<keep>"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*')   # string outside url(), left alone
    | url\(\s*
    (?:
        "(?P<dq>(?:\\.|[^"\\])*)"
        | '(?P<sq>(?:\\.|[^'\\])*)'
        | (?P<bare>[^)"'\s]*)
    )
    \s*\)
    """,
    re.VERBOSE | re.IGNORECASE,
)

_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
_UNESCAPED_QUOTE_RE = re.compile(r'(?<!\\)"')


def is_absolute(url: str) -> bool:
    """True for scheme-qualified (http:, data:, ...) and protocol-relative URLs."""
    return url.startswith("//") or _SCHEME_RE.match(url) is not None


def join_path(base_location: str, relative: str) -> str:
    return base_location.rstrip("/") + "/" + relative.lstrip("/")


def rewrite_urls(css_text: str, base_location: str | None) -> str:
    """Make relative ``url()`` references in *css_text* absolute.

    Every matched token is re-emitted as ``url("...")``. Absolute and
    ``data:`` URLs keep their argument; only the quoting changes. With no
    usable *base_location* the text is returned unchanged.
    """
    if not base_location or not base_location.strip():
        return css_text
    try:
        urlsplit(base_location)
    except ValueError:
        logger.warning("cannot rewrite urls against invalid base %r", base_location)
        return css_text

    def _replace(match: re.Match[str]) -> str:
        if match.group("keep") is not None:
            return match.group("keep")
        if match.group("dq") is not None:
            argument = match.group("dq")
        elif match.group("sq") is not None:
            argument = _UNESCAPED_QUOTE_RE.sub(r'\\"', match.group("sq"))
        else:
            argument = match.group("bare")

        # fragment references point into the current document
        if not argument or argument.startswith("#"):
            return match.group(0)
        if not is_absolute(argument):
            argument = join_path(base_location, argument)
        return f'url("{argument}")'

    return _URL_RE.sub(_replace, css_text)
