"""Shared test setup: fast bcrypt and a fixed JWT secret before app modules import settings."""

import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret-for-unit-tests-0123456789")
os.environ.setdefault("APP_ENV", "dev")
