"""
Shared fixtures for PostgreSQL-backed integration tests.

Tests using ``pool`` are skipped when no database is reachable at the
configured DATABASE_URL (e.g. outside docker-compose).
"""

from collections.abc import Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from account_auth.adapters.repository.postgres import PostgresCredentialStore, run_migrations
from account_auth.config.settings import get_settings


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool with migrations applied, or skip."""
    settings = get_settings()
    try:
        with psycopg.connect(settings.database_url, connect_timeout=2):
            pass
    except psycopg.OperationalError:
        pytest.skip("PostgreSQL not reachable")

    pool = ConnectionPool(conninfo=settings.database_url, min_size=1, max_size=10, open=True)
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def pg_store(pool: ConnectionPool) -> Generator[PostgresCredentialStore, None, None]:
    """Store over a clean accounts table."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM accounts")
        conn.commit()
    yield PostgresCredentialStore(pool)
