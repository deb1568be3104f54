"""
Shared pytest fixtures: every test gets its own SQLite database under tmp_path.
"""
import pytest

from config import Settings
from crud.book import BookStore
from database import init_db, make_engine, make_session_factory


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'books.db'}"


@pytest.fixture
def settings(database_url):
    return Settings(database_url=database_url, seed_on_startup=True)


@pytest.fixture
async def engine(database_url):
    engine = make_engine(database_url)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def store(engine):
    return BookStore(make_session_factory(engine))
