"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or the real Anthropic API
os.environ.setdefault("ANTHROPIC_API_KEY", "")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
