"""Tests for Settings validation in app.core.config."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestDatabaseUrl(unittest.TestCase):
    """DATABASE_URL accepts PostgreSQL URLs and pins the psycopg2 driver."""

    def test_default_uses_psycopg2(self) -> None:
        self.assertTrue(_settings().DATABASE_URL.startswith("postgresql+psycopg2://"))

    def test_schemes_normalized_to_psycopg2(self) -> None:
        for scheme in ("postgresql", "postgres", "postgres+psycopg2", "postgresql+psycopg2"):
            with self.subTest(scheme=scheme):
                url = _settings(DATABASE_URL=f"  {scheme}://u:p@db:5432/accounts ").DATABASE_URL
                self.assertEqual(url, "postgresql+psycopg2://u:p@db:5432/accounts")

    def test_non_postgres_rejected(self) -> None:
        for url in ("mysql://u:p@db/accounts", "sqlite://", "   "):
            with self.subTest(url=url):
                with self.assertRaises(ValidationError):
                    _settings(DATABASE_URL=url)


class TestOtherSettings(unittest.TestCase):
    def test_log_level_upper_cased(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")

    def test_api_prefix_trailing_slash_stripped(self) -> None:
        self.assertEqual(_settings(API_PREFIX="/api/").API_PREFIX, "/api")

    def test_wildcard_cors_dropped_outside_dev(self) -> None:
        settings = _settings(APP_ENV="prod", CORS_ORIGINS="*, https://app.example.com")
        self.assertEqual(settings.cors_origins, ["https://app.example.com"])


if __name__ == "__main__":
    unittest.main()
