"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database; cheap bcrypt cost keeps auth tests fast
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")
