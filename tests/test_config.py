"""
Sample API: Configuration and Connection Source Tests
=======================================================

What:  Settings validation and Database construction from settings.
"""

import pytest
from pydantic import ValidationError as SettingsValidationError
from sqlalchemy import text

from sample_api.config import Settings
from sample_api.database import Database


class TestSettings:

    def test_defaults_match_bounded_pool(self):
        settings = Settings(_env_file=None, database_url="sqlite+aiosqlite:///x.db")

        assert settings.db_pool_size == 10
        assert settings.db_max_overflow == 0
        assert settings.db_connect_timeout == 30

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(SettingsValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_cors_origins_split(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


class TestDatabaseFromSettings:

    @pytest.mark.asyncio
    async def test_pool_sized_from_settings(self, tmp_path):
        settings = Settings(
            _env_file=None,
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'cfg.db'}",
            db_pool_size=3,
        )

        database = Database.from_settings(settings)
        try:
            assert database.pool_status() == {"size": 3, "checked_out": 0}
        finally:
            await database.dispose()

    @pytest.mark.asyncio
    async def test_session_released_on_error(self, database):
        with pytest.raises(RuntimeError):
            async with database.session() as session:
                await session.execute(text("SELECT 1"))
                raise RuntimeError("handler failed")

        assert database.pool_status()["checked_out"] == 0
