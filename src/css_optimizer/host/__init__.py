from css_optimizer.host.manifest import load_manifest, parse_manifest
from css_optimizer.host.policy import SkipPolicy
from css_optimizer.host.processor import StyleProcessor
from css_optimizer.host.sources import SourceResolver, base_location_of, normalize_src

__all__ = [
    "load_manifest",
    "parse_manifest",
    "SkipPolicy",
    "SourceResolver",
    "StyleProcessor",
    "base_location_of",
    "normalize_src",
]
