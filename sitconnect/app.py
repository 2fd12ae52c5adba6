"""Application start-up and wiring."""

import logging

import aiosqlite

from sitconnect.config import Settings
from sitconnect.errors import InitializationError
from sitconnect.listings.service import ListingService
from sitconnect.persistence.database import Database
from sitconnect.persistence.repository import Repository
from sitconnect.session import RoleSession

logger = logging.getLogger(__name__)


class Application:
    """Owns the store and the objects the screens talk to.

    `start()` must succeed before anything else is used. If it fails the
    error message is kept in `startup_error` so the caller can show a
    blocking error state.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._db = Database(
            settings.database.path,
            seed_sample_data=settings.database.seed_sample_data,
        )
        self._repo = Repository(self._db)
        self._session = RoleSession(settings.identity)
        self._listings = ListingService(self._repo, self._session)
        self._ready = False
        self._startup_error: str | None = None

    @property
    def db(self) -> Database:
        return self._db

    @property
    def repo(self) -> Repository:
        return self._repo

    @property
    def session(self) -> RoleSession:
        return self._session

    @property
    def listings(self) -> ListingService:
        return self._listings

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def startup_error(self) -> str | None:
        return self._startup_error

    async def start(self) -> None:
        """Prepare the store."""
        logger.info("Starting SitConnect with database %s", self._settings.database.path)
        try:
            await self._db.initialize()
        except (aiosqlite.Error, OSError) as e:
            self._startup_error = str(e) or type(e).__name__
            self._ready = False
            raise InitializationError(
                f"Could not initialize database: {self._startup_error}",
                path=str(self._settings.database.path),
            ) from e
        self._startup_error = None
        self._ready = True
        logger.info("SitConnect ready")

    async def stop(self) -> None:
        """Close the store."""
        await self._db.close()
        self._ready = False
        self._session.clear()

    async def __aenter__(self) -> "Application":
        try:
            await self.start()
        except InitializationError:
            await self._db.close()
            raise
        return self

    async def __aexit__(self, *args) -> None:
        await self.stop()
