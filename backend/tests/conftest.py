"""Root conftest - shared test configuration."""

import os

# Tests never reach a real database unless a fixture builds one explicitly
os.environ.setdefault("LEDGER_BACKEND", "memory")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
