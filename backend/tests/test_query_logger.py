from sqlalchemy import create_engine, text

from core.query_logger import QueryLogger, extract_tables_from_query, setup_query_logging


def test_extract_tables():
    sql = (
        'UPDATE drink_dollars SET coins=(drink_dollars.coins - ?) '
        'WHERE drink_dollars.user_id = ? AND drink_dollars.coins >= ?'
    )
    assert extract_tables_from_query(sql) == ["drink_dollars"]

    join = "SELECT * FROM bookings JOIN venues ON venues.id = bookings.venue_id"
    assert extract_tables_from_query(join) == ["bookings", "venues"]

    insert = 'INSERT INTO "redemptions" (booking_id, amount) VALUES (?, ?)'
    assert extract_tables_from_query(insert) == ["redemptions"]

    assert extract_tables_from_query("SELECT 1") == []


def test_slow_queries_are_counted():
    stats = QueryLogger()
    stats.slow_query_threshold = 0.5

    stats.record("SELECT * FROM venues", 0.1)
    stats.record("SELECT * FROM venues", 0.9)

    assert stats.query_stats["total_queries"] == 2
    assert stats.query_stats["slow_queries"] == 1
    assert stats.query_stats["queries_by_table"] == {"venues": 2}

    stats.reset_stats()
    assert stats.query_stats["total_queries"] == 0
    assert stats.query_stats["queries_by_table"] == {}


def test_engine_statements_are_recorded():
    engine = create_engine("sqlite://")
    stats = QueryLogger(slow_query_threshold=60)
    stats.enabled = True
    setup_query_logging(engine, stats)

    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE bookings (id INTEGER PRIMARY KEY)"))
        conn.execute(text("INSERT INTO bookings (id) VALUES (1)"))
        conn.execute(text("SELECT id FROM bookings"))

    assert stats.query_stats["queries_by_table"] == {"bookings": 2}
    assert stats.query_stats["slow_queries"] == 0
    assert stats.query_stats["total_time"] > 0
    engine.dispose()


def test_disabled_logging_installs_no_hooks():
    engine = create_engine("sqlite://")
    stats = QueryLogger()
    stats.enabled = False
    setup_query_logging(engine, stats)

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))

    assert stats.query_stats["total_queries"] == 0
    engine.dispose()
