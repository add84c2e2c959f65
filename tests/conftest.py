"""Pytest fixtures for the engagement store."""

from collections.abc import AsyncIterator
from pathlib import Path

from alembic import command
from alembic.config import Config
import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlmodel import SQLModel

from db.session import build_engine
import models  # noqa: F401


def _run_alembic_migrations(db_path: Path) -> None:
    """Apply Alembic migrations to a SQLite file over a plain sync connection."""
    project_dir = Path(__file__).resolve().parents[1]
    alembic_cfg = Config(str(project_dir / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(project_dir / "alembic"))

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        with engine.begin() as connection:
            alembic_cfg.attributes["connection"] = connection
            command.upgrade(alembic_cfg, "head")
    finally:
        engine.dispose()


@pytest.fixture(scope="session")
def test_database_url(tmp_path_factory) -> str:
    """Create and migrate a file-backed SQLite database for tests."""
    db_dir = tmp_path_factory.mktemp("sqlite")
    db_path = db_dir / "engagement-test.db"
    _run_alembic_migrations(db_path)
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def test_engine(test_database_url: str) -> AsyncIterator[AsyncEngine]:
    """Create an async engine with foreign keys enforced."""
    engine = build_engine(test_database_url)
    yield engine
    await engine.dispose()


@pytest.fixture()
def session_maker(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a session factory bound to the test engine."""
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest_asyncio.fixture()
async def clean_database(session_maker) -> AsyncIterator[None]:
    """Clear tables before a test to guarantee isolation."""
    async with session_maker() as session:
        for table in reversed(SQLModel.metadata.sorted_tables):
            await session.execute(table.delete())
        await session.commit()
    yield


@pytest_asyncio.fixture()
async def db_session(session_maker, clean_database) -> AsyncIterator[AsyncSession]:
    """Provide a session on an emptied database."""
    async with session_maker() as session:
        yield session
