from __future__ import annotations

from dataclasses import dataclass

OPTIMIZED_SUFFIX = "-optimized"


@dataclass(frozen=True)
class StyleRegistration:
    """A stylesheet registered by the host page under *handle*."""

    handle: str
    src: str
    classes: tuple[str, ...] = ()


@dataclass(frozen=True)
class InlineStyle:
    """Optimized CSS ready to be inlined in place of the original stylesheet."""

    handle: str
    css: str
    source: str  # normalized src the CSS was resolved from
    original_size: int = 0

    @classmethod
    def for_registration(
        cls, registration: StyleRegistration, css: str, source: str, original_size: int
    ) -> InlineStyle:
        return cls(
            handle=registration.handle + OPTIMIZED_SUFFIX,
            css=css,
            source=source,
            original_size=original_size,
        )
