"""Root conftest: shared test configuration."""

import os

# Ensure tests never reach a real database or identity provider
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("FIREBASE_PROJECT_ID", "imago-test")
os.environ.setdefault("LOG_FORMAT", "text")
