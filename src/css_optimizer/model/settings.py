from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

from css_optimizer.config import OptimizerConfig


@dataclass(frozen=True)
class OptimizerSettings:
    """User-editable options, persisted by :class:`SettingsRepository`."""

    enabled: bool = True
    excluded_urls: tuple[str, ...] = ()  # wildcard patterns, e.g. "*/vendor/*"
    preserve_media_queries: bool = True
    exclude_font_awesome: bool = True
    excluded_classes: tuple[str, ...] = ()  # declared classes of whole stylesheets

    def optimizer_config(self, base_location: str | None = None) -> OptimizerConfig:
        """Build the per-call config for a stylesheet living at *base_location*."""
        return OptimizerConfig(
            preserve_at_rules=self.preserve_media_queries,
            base_location=base_location,
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["excluded_urls"] = list(self.excluded_urls)
        data["excluded_classes"] = list(self.excluded_classes)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OptimizerSettings:
        """Build settings from stored options, filling missing keys with defaults."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                continue
            if key in ("excluded_urls", "excluded_classes"):
                kwargs[key] = _clean_lines(value)
            else:
                kwargs[key] = bool(value)
        return cls(**kwargs)


def _clean_lines(value: Any) -> tuple[str, ...]:
    """Normalise a list or newline-separated string into trimmed, non-empty items."""
    if isinstance(value, str):
        value = value.splitlines()
    return tuple(item.strip() for item in value or () if item and item.strip())


def parse_lines(text: str) -> tuple[str, ...]:
    """Split textarea input into one entry per non-blank line."""
    return _clean_lines(text)
