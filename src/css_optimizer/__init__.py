"""css_optimizer: shrink stylesheets for inlining without changing their behaviour."""
from __future__ import annotations

from css_optimizer.config import OptimizerConfig, ServiceConfig
from css_optimizer.optimizer import dedupe, minify, optimize, rewrite_urls

__version__ = "1.0.0"

__all__ = [
    "OptimizerConfig",
    "ServiceConfig",
    "dedupe",
    "minify",
    "optimize",
    "rewrite_urls",
    "__version__",
]
