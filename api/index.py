"""Vercel serverless entry point for the CSS Optimizer settings app."""
import os
import sys

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from css_optimizer.store.db import Database
from css_optimizer.store.migrations import run_migrations
from css_optimizer.web.app import create_app

# In-memory DB for serverless demo
db = Database(":memory:")
db.connect()
run_migrations(db)

app = create_app(db=db)
