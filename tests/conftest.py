import pytest
from fastapi.testclient import TestClient

from tableview.api import create_app
from tableview.config import Settings
from tableview.database.init_db import create_tables, seed_sample_data
from tableview.database.session import create_db_engine


@pytest.fixture
def test_settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'test.db'}", log_level="DEBUG")


@pytest.fixture
def empty_engine(test_settings):
    """Engine on a database that has the tables but no rows."""
    engine = create_db_engine(settings=test_settings)
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def engine(empty_engine):
    seed_sample_data(empty_engine)
    return empty_engine


@pytest.fixture
def bare_engine(tmp_path, test_settings):
    """Engine on a database without any tables."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'bare.db'}", settings=test_settings)
    yield engine
    engine.dispose()


@pytest.fixture
def make_client():
    def _make(engine, settings):
        return TestClient(create_app(settings, engine=engine))
    return _make


@pytest.fixture
def client(make_client, engine, test_settings):
    with make_client(engine, test_settings) as c:
        yield c
