from css_optimizer.store.db import Database
from css_optimizer.store.migrations import run_migrations
from css_optimizer.store.repositories import SettingsRepository

__all__ = ["Database", "SettingsRepository", "run_migrations"]
