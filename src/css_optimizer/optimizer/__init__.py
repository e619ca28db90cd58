from css_optimizer.optimizer.blocks import extract_blocks, scan
from css_optimizer.optimizer.dedupe import DeclarationList, dedupe
from css_optimizer.optimizer.minify import minify, strip_comments
from css_optimizer.optimizer.pipeline import optimize
from css_optimizer.optimizer.urls import join_path, rewrite_urls

__all__ = [
    "DeclarationList",
    "dedupe",
    "extract_blocks",
    "join_path",
    "minify",
    "optimize",
    "rewrite_urls",
    "scan",
    "strip_comments",
]
