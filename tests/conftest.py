import pytest_asyncio

from puzzlebot.database.database import Database


@pytest_asyncio.fixture
async def db(tmp_path):
    """Fresh SQLite database per test."""
    database = Database(f"sqlite:///{tmp_path / 'puzzles.db'}")
    await database.initialize()
    yield database
    await database.close()
