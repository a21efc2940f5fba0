"""Root conftest — shared test configuration."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_ON_STARTUP", "false")
os.environ.setdefault("CREATE_SCHEMA_ON_STARTUP", "false")
