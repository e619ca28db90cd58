"""Decide which registered stylesheets are handed to the optimizer at all."""

from __future__ import annotations

import fnmatch
import logging

from css_optimizer.model.registration import StyleRegistration
from css_optimizer.model.settings import OptimizerSettings

logger = logging.getLogger(__name__)

ALWAYS_SKIPPED_HANDLES = frozenset({"admin-bar", "dashicons"})

FONT_AWESOME_HANDLES = frozenset(
    {
        "font-awesome",
        "fontawesome",
        "fa",
        "font-awesome-official",
        "font-awesome-solid",
        "font-awesome-brands",
        "font-awesome-regular",
    }
)


def is_font_awesome(registration: StyleRegistration) -> bool:
    handle = registration.handle
    src = registration.src.lower()
    return (
        handle in FONT_AWESOME_HANDLES
        or handle.startswith("fa-")
        or "fontawesome" in handle
        or "font-awesome" in src
        or "fontawesome" in src
    )


class SkipPolicy:
    """Skip rules applied per stylesheet, before its content is fetched.

    - ``admin-bar`` and ``dashicons`` are never touched.
    - Font Awesome handles are left alone while ``exclude_font_awesome`` is on.
    - ``excluded_urls`` are shell-style wildcards matched against the src.
    - ``excluded_classes`` match the classes a stylesheet was registered with.
    """

    def __init__(self, settings: OptimizerSettings) -> None:
        self._settings = settings

    def should_skip(self, registration: StyleRegistration) -> bool:
        """Return True if *registration* must be served as-is."""
        reason = self.skip_reason(registration)
        if reason:
            logger.info("skipping %s: %s", registration.handle, reason)
        return reason is not None

    def skip_reason(self, registration: StyleRegistration) -> str | None:
        if registration.handle in ALWAYS_SKIPPED_HANDLES:
            return "protected handle"
        if self._settings.exclude_font_awesome and is_font_awesome(registration):
            return "font awesome"
        for pattern in self._settings.excluded_urls:
            if fnmatch.fnmatchcase(registration.src, pattern):
                return f"url matches {pattern!r}"
        excluded = set(registration.classes) & set(self._settings.excluded_classes)
        if excluded:
            return f"excluded class {sorted(excluded)[0]!r}"
        return None
