from sqlalchemy import inspect, text

from tableview.database.init_db import create_tables, init_database, seed_sample_data
from tableview.database.session import connection_scope, create_db_engine


def _count(engine, table):
    with connection_scope(engine) as conn:
        return conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one()


def test_init_database_creates_and_seeds(tmp_path):
    url = f"sqlite:///{tmp_path / 'data' / 'dev.db'}"
    init_database(url=url, sample_data=True)

    engine = create_db_engine(url)
    try:
        assert set(inspect(engine).get_table_names()) == {"actor", "film", "staff", "customer"}
        assert _count(engine, "actor") == 3
        assert _count(engine, "customer") == 2
    finally:
        engine.dispose()


def test_seeding_twice_adds_nothing(empty_engine):
    assert seed_sample_data(empty_engine) == 9
    assert seed_sample_data(empty_engine) == 0
    assert _count(empty_engine, "film") == 2


def test_reset_clears_rows(engine):
    create_tables(engine, reset=True)
    assert _count(engine, "staff") == 0
    assert engine.pool.checkedout() == 0
