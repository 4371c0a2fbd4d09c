# config/settings/test.py
"""
Test environment settings.

This file is used exclusively for running tests.
"""
import os

# Force test environment before base settings read it
os.environ.setdefault("ENVIRONMENT", "test")

from .base import *
from .databases import get_database_config

ENVIRONMENT = "test"

# Load .env.test explicitly
env_test_path = BASE_DIR / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=False)

# SQLite by default, PostgreSQL with DB_ENGINE=postgresql
DATABASES = {"default": get_database_config("test")}

# Speed up password hashing in tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Keep test output quiet
LOGGING["handlers"]["console"]["level"] = "WARNING"

# Let pytest's caplog see application records
for _logger in LOGGING["loggers"].values():
    _logger["propagate"] = True
