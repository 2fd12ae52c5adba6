"""Async SQLite database wrapper."""

import asyncio
import logging
from pathlib import Path

import aiosqlite

from sitconnect.persistence.models import SCHEMA, SEED_LISTINGS, now_iso

logger = logging.getLogger(__name__)


class Database:
    """Async SQLite database connection manager.

    The connection is opened lazily by the first statement (or an explicit
    `open()`) and reused until `close()`.
    """

    def __init__(self, path: Path, seed_sample_data: bool = True) -> None:
        self._path = Path(path)
        self._seed_sample_data = seed_sample_data
        self._connection: aiosqlite.Connection | None = None
        self._open_lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> aiosqlite.Connection:
        """Get the active database connection."""
        if self._connection is None:
            raise RuntimeError("Database not connected")
        return self._connection

    async def open(self) -> aiosqlite.Connection:
        """Return the shared connection, opening it on first use."""
        async with self._open_lock:
            if self._connection is None:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                connection = await aiosqlite.connect(self._path)
                connection.row_factory = aiosqlite.Row
                try:
                    await connection.execute("PRAGMA foreign_keys=ON")
                    await connection.execute("PRAGMA journal_mode=WAL")
                except BaseException:
                    # Unstored connections would keep their worker thread alive
                    await connection.close()
                    raise
                self._connection = connection
                logger.info("Database opened: %s", self._path)
        return self._connection

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            await self._connection.close()
            self._connection = None
            logger.info("Database closed")

    async def initialize(self) -> None:
        """Create the schema and seed sample listings into an empty store.

        Safe to call repeatedly: tables are created only if missing and
        seeding only happens while the listings table is empty.
        """
        try:
            connection = await self.open()
            for statement in SCHEMA:
                await connection.execute(statement)
            await connection.commit()
            logger.debug("Database schema initialized")

            row = await self.fetchone("SELECT COUNT(*) AS count FROM listings")
            if row["count"] == 0 and self._seed_sample_data:
                await self._seed()
            else:
                logger.debug("Listings present (%d), skipping seed", row["count"])
        except aiosqlite.Error:
            logger.exception("Database initialization failed: %s", self._path)
            raise

    async def _seed(self) -> None:
        """Insert the demo listings in one transaction."""
        created_at = now_iso()
        try:
            await self.executemany(
                """
                INSERT INTO listings
                (creatorRoleId, sitterType, location, startDate, endDate,
                 description, createdAt)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                [(*listing, created_at) for listing in SEED_LISTINGS],
            )
            await self.commit()
        except aiosqlite.Error:
            await self.rollback()
            raise
        logger.info("Seeded %d sample listings", len(SEED_LISTINGS))

    async def execute(
        self, sql: str, parameters: tuple | dict | None = None
    ) -> aiosqlite.Cursor:
        """Execute a SQL statement."""
        connection = await self.open()
        if parameters is None:
            return await connection.execute(sql)
        return await connection.execute(sql, parameters)

    async def executemany(
        self, sql: str, parameters: list[tuple | dict]
    ) -> aiosqlite.Cursor:
        """Execute a SQL statement with multiple parameter sets."""
        connection = await self.open()
        return await connection.executemany(sql, parameters)

    async def fetchone(
        self, sql: str, parameters: tuple | dict | None = None
    ) -> aiosqlite.Row | None:
        """Execute a query and fetch one row."""
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(
        self, sql: str, parameters: tuple | dict | None = None
    ) -> list[aiosqlite.Row]:
        """Execute a query and fetch all rows."""
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchall()

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self.connection.commit()

    async def rollback(self) -> None:
        """Roll back the current transaction."""
        await self.connection.rollback()

    async def __aenter__(self) -> "Database":
        await self.open()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
