"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (mocks, no database)
    │   ├── domain/
    │   ├── application/
    │   └── infrastructure/
    └── integration/           # In-memory SQLite via aiosqlite
        ├── persistence/       # Repositories against real tables
        └── api/               # Full HTTP stack through httpx ASGITransport
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from userhub_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load test overrides if present (same mechanism as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Clear cached settings so every test session starts from a fresh load."""
    clear_settings_cache()
    yield
    clear_settings_cache()
