"""
Storage for dollar quotes using async SQLite.

Every call opens its own connection and closes it before returning; nothing
is shared between requests except the database file itself.
"""

import asyncio
import logging
import sqlite3
from datetime import UTC, datetime
from typing import Final

import aiosqlite

from .models import QuoteRecord
from .settings import storage_settings

INSERT_QUOTE: Final[str] = (
    "INSERT INTO cotacao (created_at, bid) VALUES (:created_at, :bid)"
)

SELECT_LATEST_QUOTE: Final[str] = """
    SELECT created_at, bid
    FROM cotacao
    ORDER BY rowid DESC
    LIMIT 1
"""

CREATE_QUOTE_TABLE: Final[str] = """
    CREATE TABLE IF NOT EXISTS cotacao (
        created_at TEXT NOT NULL,
        bid TEXT NOT NULL
    )
"""

logger = logging.getLogger(__name__)


class QuoteStorageError(Exception):
    """Base class for quote persistence failures."""


class QuotePrepareError(QuoteStorageError):
    """The connection or statement could not be prepared."""


class QuoteExecError(QuoteStorageError):
    """The insert statement failed to execute or commit."""


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class QuoteStorage:
    """Async SQLite-based storage for dollar quotes."""

    def __init__(self, database_path: str | None = None):
        """Initialize the quote storage."""
        self.database_path = database_path or storage_settings.database_path

    async def insert_quote(self, bid: str, timeout: float) -> QuoteRecord:
        """
        Append a quote record stamped with the current time.

        The deadline bounds opening the connection and executing the insert.
        The commit only starts once the insert ran in time and is not
        cancelled, so a raised error always means no row was committed.

        Args:
            bid: The bid exactly as received from the upstream API
            timeout: Seconds allowed for the insert, connection included

        Returns:
            The stored QuoteRecord

        Raises:
            QuotePrepareError: Opening the connection or cursor failed
            QuoteExecError: Executing or committing the insert failed
        """
        deadline = asyncio.get_running_loop().time() + timeout
        record = QuoteRecord(created_at=datetime.now(UTC), bid=bid)

        # Lock waits outlast the deadline so contention surfaces as a timeout.
        connection = aiosqlite.connect(self.database_path, timeout=timeout * 2)
        try:
            try:
                async with asyncio.timeout_at(deadline):
                    await connection
                    cursor = await connection.cursor()
            except (sqlite3.Error, TimeoutError) as e:
                raise QuotePrepareError(
                    f"insert quote prepare: {_describe(e)}"
                ) from e

            try:
                async with asyncio.timeout_at(deadline):
                    await cursor.execute(INSERT_QUOTE, record.model_dump())
            except TimeoutError as e:
                # Uncommitted; closing the connection rolls the insert back.
                await connection.interrupt()
                raise QuoteExecError(f"insert quote exec: {_describe(e)}") from e
            except sqlite3.Error as e:
                raise QuoteExecError(f"insert quote exec: {_describe(e)}") from e

            try:
                await connection.commit()
            except sqlite3.Error as e:
                raise QuoteExecError(f"insert quote commit: {_describe(e)}") from e
        finally:
            await connection.close()

        logger.debug(f"Saved quote {record.bid} to {self.database_path}")
        return record

    async def get_latest_quote(self) -> QuoteRecord | None:
        """Get the most recently inserted quote record."""
        async with (
            aiosqlite.connect(self.database_path) as connection,
            connection.execute(SELECT_LATEST_QUOTE) as cursor,
        ):
            row = await cursor.fetchone()

        if row:
            return QuoteRecord(
                created_at=datetime.fromisoformat(row[0]),
                bid=row[1],
            )
        return None

    async def create_schema(self) -> None:
        """Create the cotacao table if it doesn't exist."""
        async with aiosqlite.connect(self.database_path) as connection:
            await connection.execute(CREATE_QUOTE_TABLE)
            await connection.commit()
        logger.info(f"Quote schema ready in {self.database_path}")


async def main() -> None:
    """Provision the quote database schema."""
    storage = QuoteStorage()
    await storage.create_schema()


if __name__ == "__main__":
    asyncio.run(main())
