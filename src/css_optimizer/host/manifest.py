"""Read style registrations from a JSON manifest.

The manifest is a list of objects::

    [{"handle": "theme", "src": "/wp-content/themes/x/style.css", "classes": ["main"]}]
"""

from __future__ import annotations

import json
from pathlib import Path

from css_optimizer.errors import ManifestError
from css_optimizer.model.registration import StyleRegistration


def parse_manifest(data: object) -> tuple[StyleRegistration, ...]:
    if not isinstance(data, list):
        raise ManifestError("manifest must be a JSON list of registrations")
    registrations: list[StyleRegistration] = []
    for position, entry in enumerate(data):
        if not isinstance(entry, dict) or not entry.get("handle"):
            raise ManifestError(f"entry {position} needs a 'handle'")
        classes = entry.get("classes") or ()
        if isinstance(classes, str):
            classes = classes.split()
        registrations.append(
            StyleRegistration(
                handle=str(entry["handle"]),
                src=str(entry.get("src") or ""),
                classes=tuple(str(c) for c in classes),
            )
        )
    return tuple(registrations)


def load_manifest(path: str | Path) -> tuple[StyleRegistration, ...]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ManifestError(f"cannot read manifest {path}: {exc}", cause=exc) from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"manifest {path} is not valid JSON: {exc}", cause=exc) from exc
    return parse_manifest(data)
