import pytest

from puzzlebot.config import Config


@pytest.mark.parametrize("url,expected", [
    ("sqlite:///puzzles.db", "sqlite+aiosqlite:///puzzles.db"),
    ("postgresql://bot@localhost/puzzles", "postgresql+asyncpg://bot@localhost/puzzles"),
    ("postgres://bot@localhost/puzzles", "postgresql+asyncpg://bot@localhost/puzzles"),
    ("sqlite+aiosqlite:///already.db", "sqlite+aiosqlite:///already.db"),
])
def test_async_database_url(url, expected):
    assert Config.get_async_database_url(url) == expected


def test_guild_ids(monkeypatch):
    monkeypatch.setattr(Config, "DISCORD_GUILD_IDS", "123, 456,")
    assert Config.get_guild_ids() == [123, 456]

    monkeypatch.setattr(Config, "DISCORD_GUILD_IDS", "")
    assert Config.get_guild_ids() == []

    monkeypatch.setattr(Config, "DISCORD_GUILD_IDS", "abc")
    with pytest.raises(ValueError):
        Config.get_guild_ids()


def test_validate_requires_token(monkeypatch):
    monkeypatch.setattr(Config, "DISCORD_TOKEN", None)
    with pytest.raises(ValueError):
        Config.validate()
