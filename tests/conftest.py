"""Pytest configuration and fixtures for testing."""
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from sqlalchemy import Column, Integer, String, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from xrbase.config import get_app_config  # noqa: E402
from xrbase.db import Base, EntityMixin  # noqa: E402


class Account(EntityMixin, Base):
    """测试用实体"""
    __tablename__ = "test_accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False)
    status = Column(Integer, nullable=True)


TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(autouse=True)
def _clear_config_cache() -> Generator[None, None, None]:
    """Each test sees settings built from its own environment."""
    get_app_config.cache_clear()
    yield
    get_app_config.cache_clear()


# Fixture for a temporary directory
@pytest.fixture(scope="session")
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing and clean up after."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


# Fixture for a database session
@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a new database session, rolled back at the end of the test."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()

    yield session

    session.rollback()
    session.close()


@pytest.fixture
def account_model():
    return Account
