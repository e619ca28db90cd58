from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OptimizerConfig:
    """Options for a single :func:`css_optimizer.optimize` call."""

    preserve_at_rules: bool = True
    base_location: str | None = None  # directory or URL the stylesheet came from


@dataclass(frozen=True)
class ServiceConfig:
    db_path: str = "css_optimizer.db"
    site_url: str = "http://localhost"
    document_root: str = "."
    search_dirs: tuple[str, ...] = ()
    fetch_timeout: float = 10.0
    host: str = "127.0.0.1"
    port: int = 5000
