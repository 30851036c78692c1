from __future__ import annotations

import os
from pathlib import Path

# Load dotenv files early so test fixtures can read overrides via os.getenv
try:  # pragma: no cover
    from dotenv import load_dotenv

    TEST_ROOT = Path(__file__).resolve().parent
    load_dotenv(TEST_ROOT / ".env", override=False)
except ImportError:
    pass

# Settings are built on first import of the package, so the test environment
# must be in place before any ``ucsb_api`` module is imported.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_JWT_SECRET = "test-secret-key"

os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["JWT_SECRET_KEY"] = TEST_JWT_SECRET
os.environ.setdefault("ENABLE_FILE_LOGGING", "false")
