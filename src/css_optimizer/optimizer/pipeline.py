"""The optimize() entry point: extract, dedupe, reassemble, minify, rewrite."""

from __future__ import annotations

import logging

from css_optimizer.config import OptimizerConfig
from css_optimizer.optimizer.blocks import extract_blocks
from css_optimizer.optimizer.dedupe import dedupe
from css_optimizer.optimizer.minify import minify
from css_optimizer.optimizer.urls import rewrite_urls

__all__ = ["optimize"]

logger = logging.getLogger(__name__)


def _reassemble(css_text: str, config: OptimizerConfig) -> str:
    blocks = extract_blocks(css_text, preserve_at_rules=config.preserve_at_rules)

    pieces = list(blocks.statements)
    for rule in blocks.simple_rules:
        if rule.nested:
            pieces.append(rule.raw)
            continue
        declarations = dedupe(rule.declarations)
        if declarations:
            pieces.append(f"{rule.selector}{{{declarations}}}")

    assembled = "".join(pieces)
    if blocks.at_rule_blocks:
        assembled += "\n" + "\n".join(block.text for block in blocks.at_rule_blocks)
    return assembled


def optimize(css_text: str, config: OptimizerConfig | None = None) -> str:
    """Return a smaller, behaviourally equivalent version of *css_text*.

    Never returns an empty string for non-empty input: when nothing usable
    is extracted the original text comes back unchanged.
    """
    if not css_text:
        return css_text
    config = config or OptimizerConfig()

    optimized = minify(_reassemble(css_text, config))
    if not optimized:
        logger.debug("nothing extracted from %d bytes, returning input", len(css_text))
        return css_text

    if config.base_location:
        optimized = rewrite_urls(optimized, config.base_location)

    logger.debug("optimized stylesheet: %d -> %d bytes", len(css_text), len(optimized))
    return optimized
