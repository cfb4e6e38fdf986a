"""
Point the app at a throwaway SQLite database before anything imports it,
and give every test freshly created tables.
"""
import os
import tempfile

_DB_PATH = os.path.join(tempfile.mkdtemp(prefix="workout-log-tests-"), "test.db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"

import pytest
from sqlalchemy import create_engine

from workout_log import models  # noqa: F401  # registers every table on Base.metadata
from workout_log.db import Base, SessionLocal

_sync_engine = create_engine(f"sqlite:///{_DB_PATH}")


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(_sync_engine)
    Base.metadata.create_all(_sync_engine)
    yield


@pytest.fixture
async def db():
    async with SessionLocal() as session:
        yield session
