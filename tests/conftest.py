"""Shared fixtures for the SitConnect test suite."""

import pytest
import pytest_asyncio

from sitconnect.config import DatabaseConfig, IdentityConfig, LoggingConfig, Settings
from sitconnect.persistence.database import Database
from sitconnect.persistence.repository import Repository


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "sitconnect.db"


@pytest_asyncio.fixture
async def seeded_db(db_path):
    """Initialized database holding the five sample listings."""
    db = Database(db_path)
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def empty_db(db_path):
    """Initialized database with seeding turned off."""
    db = Database(db_path, seed_sample_data=False)
    await db.initialize()
    yield db
    await db.close()


@pytest.fixture
def seeded_repo(seeded_db):
    return Repository(seeded_db)


@pytest.fixture
def repo(empty_db):
    return Repository(empty_db)


@pytest.fixture
def settings(tmp_path, db_path):
    return Settings(
        database=DatabaseConfig(path=db_path, seed_sample_data=True),
        identity=IdentityConfig(requester_role_id=1, sitter_role_id=2),
        logging=LoggingConfig(level="DEBUG", log_dir=tmp_path / "logs", json_format=True),
    )
