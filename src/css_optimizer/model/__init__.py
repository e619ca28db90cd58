from css_optimizer.model.registration import InlineStyle, StyleRegistration
from css_optimizer.model.settings import OptimizerSettings
from css_optimizer.model.stylesheet import (
    AtRuleBlock,
    Declaration,
    ExtractedBlocks,
    SimpleRule,
    Span,
    SpanKind,
)

__all__ = [
    "AtRuleBlock",
    "Declaration",
    "ExtractedBlocks",
    "InlineStyle",
    "OptimizerSettings",
    "SimpleRule",
    "Span",
    "SpanKind",
    "StyleRegistration",
]
