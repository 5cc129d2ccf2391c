# backend/core/query_logger.py

"""
Per-table SQL statistics with slow query warnings.

Balance debits and booking version checks both land on a handful of
tables; counting statements per table shows where checkout contention is.
"""

import logging
import re
import time
from collections import Counter
from typing import List

from sqlalchemy import event
from sqlalchemy.engine import Engine

from core.config import get_settings

query_logger = logging.getLogger("query_performance")

settings = get_settings()

_TABLE_REF = re.compile(
    r"\b(?:FROM|JOIN|UPDATE|INTO)\s+[\"`']?(?:\w+\.)?[\"`']?(\w+)", re.IGNORECASE
)


def extract_tables_from_query(query: str) -> List[str]:
    """Sorted, lower-cased names of the tables a statement reads or writes"""
    return sorted({name.lower() for name in _TABLE_REF.findall(query)})


class QueryLogger:
    """Statement counts by table, total time and slow statements"""

    def __init__(self, slow_query_threshold: float = settings.slow_query_threshold_seconds):
        self.enabled = settings.log_sql_queries
        self.slow_query_threshold = slow_query_threshold
        self.reset_stats()

    def record(self, statement: str, elapsed: float):
        self.query_stats["total_queries"] += 1
        self.query_stats["total_time"] += elapsed
        self._tables.update(extract_tables_from_query(statement))
        self.query_stats["queries_by_table"] = dict(self._tables)

        if elapsed > self.slow_query_threshold:
            self.query_stats["slow_queries"] += 1
            query_logger.warning(f"SLOW QUERY ({elapsed:.3f}s): {statement[:200]}")

    def reset_stats(self):
        self._tables = Counter()
        self.query_stats = {
            "total_queries": 0,
            "slow_queries": 0,
            "total_time": 0.0,
            "queries_by_table": {},
        }


query_logger_instance = QueryLogger()


def setup_query_logging(engine: Engine, stats: QueryLogger = None):
    """Time every statement on ``engine`` into ``stats`` when SQL logging is on"""
    stats = stats or query_logger_instance
    if not stats.enabled:
        return

    @event.listens_for(engine, "before_cursor_execute")
    def start_timer(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_started", []).append(time.perf_counter())

    @event.listens_for(engine, "after_cursor_execute")
    def record_elapsed(conn, cursor, statement, parameters, context, executemany):
        stats.record(statement, time.perf_counter() - conn.info["query_started"].pop())
