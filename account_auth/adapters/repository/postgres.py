"""
PostgreSQL repository adapter - Implements CredentialStore protocol.

This module provides the PostgreSQL implementation of the domain's
credential store port using psycopg3 with raw SQL.

Uniqueness Design:
------------------
The registration service performs an advisory lookup before inserting,
but two concurrent registrations can both pass that lookup. The
``accounts`` table therefore carries two UNIQUE constraints:

1. **accounts_email_key**: one account per email address.
2. **accounts_country_code_mobile_key**: one account per (country code, mobile).

A violation of either surfaces from psycopg as ``UniqueViolation`` and is
translated into the domain's ``DuplicateAccount``, without saying which
constraint fired.
"""

import logging
from pathlib import Path

from psycopg.errors import UniqueViolation
from psycopg_pool import ConnectionPool

from account_auth.domain.exceptions import DuplicateAccount
from account_auth.domain.ports import Account, Address, NewAccount, Role

logger = logging.getLogger(__name__)

_ACCOUNT_COLUMNS = """
    account_id::text, name, email, password_hash, country_code, mobile,
    street, city, state, country, zip_code, role, date_of_birth,
    created_at, updated_at
"""


class PostgresCredentialStore:
    """
    Implements CredentialStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email(self, email: str) -> Account | None:
        """
        Fetch the account registered under ``email``.

        Args:
            email: Normalized email address

        Returns:
            The matching Account, or None
        """
        sql = f"SELECT {_ACCOUNT_COLUMNS} FROM accounts WHERE email = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()

        return _map_row(row) if row is not None else None

    def find_conflicting(self, email: str, country_code: str, mobile: str) -> Account | None:
        """
        Fetch any account sharing the email or the (country code, mobile) pair.

        Args:
            email: Normalized email address
            country_code: Dialling prefix
            mobile: 10-character mobile number

        Returns:
            A colliding Account, or None
        """
        sql = f"""
            SELECT {_ACCOUNT_COLUMNS}
            FROM accounts
            WHERE email = %s OR (country_code = %s AND mobile = %s)
            LIMIT 1
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email, country_code, mobile))
            row = cursor.fetchone()

        return _map_row(row) if row is not None else None

    def create(self, account: NewAccount) -> Account:
        """
        Insert a new account row.

        The database assigns ``account_id``, ``created_at`` and ``updated_at``.

        Args:
            account: Account fields with the password already hashed

        Returns:
            The stored Account

        Raises:
            DuplicateAccount: If a UNIQUE constraint rejects the row
        """
        sql = f"""
            INSERT INTO accounts (
                name, email, password_hash, country_code, mobile,
                street, city, state, country, zip_code, role, date_of_birth
            )
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING {_ACCOUNT_COLUMNS}
        """
        params = (
            account.name,
            account.email,
            account.password_hash,
            account.country_code,
            account.mobile,
            account.address.street,
            account.address.city,
            account.address.state,
            account.address.country,
            account.address.zip_code,
            account.role.value,
            account.date_of_birth,
        )

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, params)
                row = cursor.fetchone()
                conn.commit()
        except UniqueViolation as exc:
            raise DuplicateAccount() from exc

        return _map_row(row)

    def ping(self) -> None:
        """Round-trip a trivial query; raises if the database is unreachable."""
        with self._pool.connection() as conn:
            conn.execute("SELECT 1")


def _map_row(row: tuple) -> Account:
    """Convert a raw ``accounts`` tuple into the domain ``Account``."""
    return Account(
        account_id=row[0],
        name=row[1],
        email=row[2],
        password_hash=row[3],
        country_code=row[4],
        mobile=row[5],
        address=Address(
            street=row[6],
            city=row[7],
            state=row[8],
            country=row[9],
            zip_code=row[10],
        ),
        role=Role(row[11]),
        date_of_birth=row[12],
        created_at=row[13],
        updated_at=row[14],
    )


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: account_auth/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
