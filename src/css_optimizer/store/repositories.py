from __future__ import annotations

import json
from datetime import datetime, timezone

from css_optimizer.model.settings import OptimizerSettings
from css_optimizer.store.db import Database

SETTINGS_OPTION = "css_optimizer_options"


class SettingsRepository:
    """Repository for the persisted :class:`OptimizerSettings`."""

    def __init__(self, db: Database, option_name: str = SETTINGS_OPTION) -> None:
        self._db = db
        self._option_name = option_name

    def load_raw(self) -> dict:
        """Return the stored option dict, or ``{}`` when nothing is saved."""
        row = self._db.fetch_one("SELECT value FROM options WHERE name = ?", (self._option_name,))
        if row is None:
            return {}
        try:
            data = json.loads(row["value"])
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> OptimizerSettings:
        """Merge the stored options over the defaults and store the full set back."""
        settings = OptimizerSettings.from_dict(self.load_raw())
        self.save(settings)
        return settings

    def save(self, settings: OptimizerSettings) -> None:
        """Insert or replace the stored options."""
        self._db.execute(
            """INSERT INTO options (name, value, updated_at) VALUES (?, ?, ?)
               ON CONFLICT(name) DO UPDATE SET value = excluded.value,
                                               updated_at = excluded.updated_at""",
            (
                self._option_name,
                json.dumps(settings.to_dict()),
                datetime.now(timezone.utc).isoformat(),
            ),
        )
        self._db.commit()
