from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from css_optimizer.host.policy import SkipPolicy
from css_optimizer.host.sources import SourceResolver, base_location_of, normalize_src
from css_optimizer.model.registration import InlineStyle, StyleRegistration
from css_optimizer.model.settings import OptimizerSettings
from css_optimizer.optimizer import optimize

logger = logging.getLogger(__name__)


class StyleProcessor:
    """Turn registered stylesheets into optimized inline styles.

    Each registration is handled on its own; one that is skipped or cannot
    be resolved simply produces no inline style.
    """

    def __init__(
        self,
        settings: OptimizerSettings,
        resolver: SourceResolver,
        site_url: str = "http://localhost",
    ) -> None:
        self.settings = settings
        self._resolver = resolver
        self._site_url = site_url
        self._policy = SkipPolicy(settings)

    def process_one(self, registration: StyleRegistration) -> InlineStyle | None:
        if not registration.src:
            return None
        src = normalize_src(registration.src, self._site_url)
        if self._policy.should_skip(replace(registration, src=src)):
            return None

        content = self._resolver.resolve(src)
        if not content:
            logger.warning("no stylesheet found for %s (%s)", registration.handle, src)
            return None

        config = self.settings.optimizer_config(base_location=base_location_of(src))
        css = optimize(content, config)
        logger.info("%s: %d -> %d bytes", registration.handle, len(content), len(css))
        return InlineStyle.for_registration(registration, css, src, len(content))

    def process(self, registrations: Iterable[StyleRegistration]) -> tuple[InlineStyle, ...]:
        if not self.settings.enabled:
            logger.info("optimization disabled")
            return ()
        results: list[InlineStyle] = []
        for registration in registrations:
            inline = self.process_one(registration)
            if inline is not None:
                results.append(inline)
        return tuple(results)
